"""In-memory event log with a one-shot flush to disk."""

import logging
from pathlib import Path
from typing import List, Tuple


class EventLog:
    """
    Ordered event lines accumulated over the whole run.

    One instance is created at startup and handed to the depot service
    and the presentation layer.
    """

    def __init__(self):
        self._entries: List[str] = []

    def add_entry(self, text: str) -> None:
        self._entries.append(text)

    def entries(self) -> Tuple[str, ...]:
        return tuple(self._entries)

    def __len__(self):
        return len(self._entries)

    def flush_to_file(self, path) -> bool:
        """
        Write every accumulated line to ``path``, replacing its content.

        Args:
            path: Destination file

        Returns:
            True on success, False if the file could not be written
        """
        out_file = Path(path)
        try:
            out_file.parent.mkdir(parents=True, exist_ok=True)
            with out_file.open("w", encoding="utf-8") as f:
                for line in self._entries:
                    f.write(line + "\n")
        except OSError as e:
            logging.error(f"Error writing event log to {out_file}: {e}")
            return False
        logging.info(f"Event log written to {out_file} ({len(self._entries)} entries)")
        return True
