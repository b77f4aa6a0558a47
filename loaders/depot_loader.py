"""Depot input file loader and line parser."""

import logging
import re
from pathlib import Path
from typing import List, Optional, Tuple

from config import FILE_ENCODINGS
from models import Parcel
from utils.helpers import is_blank, to_float_safe, to_int_safe

_PARCEL_SPLIT = re.compile(r"\s*,\s*")


class DepotLoader:
    """Read customer and parcel files, skipping malformed lines."""

    def __init__(self, encodings=FILE_ENCODINGS):
        """
        Initialize loader.

        Args:
            encodings: Encodings tried in order when decoding input files
        """
        self.encodings = tuple(encodings)

    def read_lines(self, file) -> List[str]:
        """
        Read all lines from a text file with encoding fallback.

        Tries each configured encoding; if none decodes cleanly the file is
        read as latin1, which maps every byte, so loading never crashes on
        bad bytes.

        Args:
            file: Path to the input file

        Returns:
            List of lines without trailing newlines

        Raises:
            OSError: If the file cannot be opened or read
        """
        file = Path(file)
        for enc in self.encodings:
            try:
                with file.open("r", encoding=enc, newline="") as f:
                    return f.read().splitlines()
            except UnicodeDecodeError:
                continue

        with file.open("r", encoding="latin1", newline="") as f:
            return f.read().splitlines()

    # ----------------------
    # Line parsers
    # ----------------------
    @staticmethod
    def parse_customer_line(line: str) -> Optional[Tuple[str, str]]:
        """
        Parse ``name,parcel_id``. Only the first comma splits.

        Returns:
            (name, upper-cased parcel ID), or None if the line is malformed
        """
        parts = line.strip().split(",", 1)
        if len(parts) != 2:
            return None
        name = parts[0].strip()
        parcel_id = parts[1].strip().upper()
        if is_blank(name) or is_blank(parcel_id):
            return None
        return name, parcel_id

    @staticmethod
    def parse_parcel_line(line: str) -> Optional[Parcel]:
        """
        Parse ``id,length,width,height,weight,days``.

        Exactly six fields after trimming whitespace around each comma.
        Dimensions and weight are floats, days an integer.

        Returns:
            Parcel with an upper-cased ID, or None if the line is malformed
        """
        parts = _PARCEL_SPLIT.split(line.strip())
        if len(parts) != 6 or is_blank(parts[0]):
            return None

        dims = [to_float_safe(v) for v in parts[1:5]]
        days = to_int_safe(parts[5])
        if any(d is None for d in dims) or days is None:
            return None

        length, width, height, weight = dims
        return Parcel(parts[0].upper(), length, width, height, weight, days)

    # ----------------------
    # File loaders
    # ----------------------
    def load_customer_records(self, file) -> List[Tuple[str, str]]:
        """
        Parse every customer line in a file.

        Malformed lines are logged and skipped; blank lines are ignored.

        Raises:
            OSError: If the file is unreadable
        """
        fname = Path(file).name
        records: List[Tuple[str, str]] = []
        for lineno, line in enumerate(self.read_lines(file), start=1):
            if is_blank(line):
                continue
            rec = self.parse_customer_line(line)
            if rec is None:
                logging.warning(f"[{fname}:{lineno}] Invalid customer entry: '{line}'")
                continue
            records.append(rec)
        return records

    def load_parcel_records(self, file) -> List[Parcel]:
        """
        Parse every parcel line in a file.

        Wrong field counts and non-numeric fields are logged and skipped;
        loading continues with the next line.

        Raises:
            OSError: If the file is unreadable
        """
        fname = Path(file).name
        parcels: List[Parcel] = []
        for lineno, line in enumerate(self.read_lines(file), start=1):
            if is_blank(line):
                continue
            parcel = self.parse_parcel_line(line)
            if parcel is None:
                logging.warning(f"[{fname}:{lineno}] Invalid parcel entry: '{line}'")
                continue
            if not parcel.is_valid_id():
                logging.warning(
                    f"[{fname}:{lineno}] Parcel ID '{parcel.parcel_id}' does not match "
                    f"the X/C + digits format; accepted anyway."
                )
            parcels.append(parcel)
        return parcels
