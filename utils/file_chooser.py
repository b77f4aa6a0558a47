from __future__ import annotations
from pathlib import Path
from typing import Sequence, List, Optional

DATA_PATTERNS = ("*.csv", "*.txt")
DATA_SUFFIXES = (".csv", ".txt")


class FileChooser:
    """
    Reusable file selection helper.
    - GUI dialog via tkinter (multi- or single-select)
    - CLI fallback (type a path) when GUI isn't available
    - Optional suffix enforcement (e.g., ['.csv'])
    - Remembers last directory used
    """
    def __init__(self, initial_dir: str | Path | None = None, parent=None):
        self.initial_dir = Path(initial_dir) if initial_dir else Path.cwd()
        # Owning Tk window, if any; otherwise a hidden root is created per dialog
        self.parent = parent

    def pick(
        self,
        *,
        title: str = "Select files",
        patterns: Sequence[str] = ("*.*",),
        allow_multiple: bool = True,
        enforce_suffixes: Sequence[str] | None = None,
        interactive: bool = True,
        cli_fallback: bool = True,
    ) -> List[Path]:
        files: List[Path] = []
        # Try GUI dialog
        if interactive:
            try:
                files = self._dialog(title, patterns, allow_multiple)
            except Exception:
                if not cli_fallback:
                    raise
        # CLI fallback
        if not files and (not interactive or cli_fallback):
            print(f"Enter one or more file paths (comma-separated). Expected patterns: {', '.join(patterns)}")
            s = input("> ").strip()
            files = [Path(p.strip()) for p in s.split(",") if p.strip()]
            if not allow_multiple:
                files = files[:1]

        # Enforce suffixes if requested
        if enforce_suffixes:
            ok = {s.lower() if s.startswith(".") else "." + s.lower() for s in enforce_suffixes}
            files = [p for p in files if p.suffix.lower() in ok]

        # Only existing files
        files = [p for p in files if p.exists()]

        # Remember last directory
        if files:
            self.initial_dir = files[0].parent

        return files

    def _dialog(self, title: str, patterns: Sequence[str], allow_multiple: bool) -> List[Path]:
        import tkinter as tk
        from tkinter import filedialog

        owner = self.parent
        root = None
        if owner is None:
            root = tk.Tk(); root.withdraw()
            owner = root
        filetypes = [(p, p) for p in patterns] or [("All files", "*.*")]
        init = str(self.initial_dir)
        try:
            if allow_multiple:
                raw = filedialog.askopenfilenames(parent=owner, title=title, initialdir=init, filetypes=filetypes)
            else:
                single = filedialog.askopenfilename(parent=owner, title=title, initialdir=init, filetypes=filetypes)
                raw = (single,) if single else ()
        finally:
            if root is not None:
                root.update(); root.destroy()
        return [Path(p) for p in raw if p]

    def pick_data_file(self, title: str, **kwargs) -> Optional[Path]:
        """Convenience: single customers/parcels text file (.csv or .txt)."""
        files = self.pick(
            title=title,
            patterns=DATA_PATTERNS,
            allow_multiple=False,
            enforce_suffixes=DATA_SUFFIXES,
            **kwargs,
        )
        return files[0] if files else None

    def pick_customer_file(self, **kwargs) -> Optional[Path]:
        return self.pick_data_file("Select customers file", **kwargs)

    def pick_parcel_file(self, **kwargs) -> Optional[Path]:
        return self.pick_data_file("Select parcels file", **kwargs)
