"""Append-only, timestamped depot report."""

import logging
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from config import REPORT_TIMESTAMP_FORMAT


class ReportWriter:
    """Append one ``[yyyy-MM-dd HH:mm:ss] <entry>`` line per event; never truncates."""

    def __init__(self, path, clock: Optional[Callable[[], datetime]] = None):
        """
        Initialize writer.

        Args:
            path: Report file (created on first write)
            clock: Returns the wall-clock time for each entry (defaults to datetime.now)
        """
        self.path = Path(path)
        self._clock = clock or datetime.now

    def write(self, entry: str) -> bool:
        """
        Append a timestamped entry.

        Write failures are logged and reported as False so in-memory
        processing carries on.
        """
        line = f"[{self._clock().strftime(REPORT_TIMESTAMP_FORMAT)}] {entry}"
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("a", encoding="utf-8") as f:
                f.write(line + "\n")
        except OSError as e:
            logging.error(f"Error writing to {self.path.name}: {e}")
            return False
        logging.debug(f"Report entry added: {line}")
        return True
