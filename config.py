"""Configuration constants for the Parcel Depot utility."""

import os
from pathlib import Path
from typing import Tuple

# ============================================================================
# FILE LOCATIONS
# ============================================================================

# Base directory for depot input/output files
DATA_DIR: Path = Path(os.getenv("DEPOT_DATA_DIR", "data"))

# Input files (one record per line, comma-separated, no header)
CUSTOMERS_FILE: Path = Path(os.getenv("DEPOT_CUSTOMERS_FILE", str(DATA_DIR / "customers.csv")))
PARCELS_FILE: Path = Path(os.getenv("DEPOT_PARCELS_FILE", str(DATA_DIR / "parcels.csv")))

# Event log is overwritten on flush; report is appended forever
EVENT_LOG_FILE: Path = Path(os.getenv("DEPOT_EVENT_LOG_FILE", str(DATA_DIR / "eventsLog.txt")))
REPORT_FILE: Path = Path(os.getenv("DEPOT_REPORT_FILE", str(DATA_DIR / "report.txt")))

# Snapshot exports (csv / xlsx)
EXPORT_DIR: Path = Path(os.getenv("DEPOT_EXPORT_DIR", str(DATA_DIR / "export")))

# Encodings tried in order when reading input files; latin1 is the last resort.
# utf-8-sig also reads plain utf-8 and strips a leading BOM.
FILE_ENCODINGS: Tuple[str, ...] = ("utf-8-sig", "cp1252")

# ============================================================================
# FEE SETTINGS
# ============================================================================

# Surcharge per day in depot (1% per day, linear, uncapped)
DAY_SURCHARGE_RATE: float = 0.01

# Parcels whose ID starts with this prefix get the discount below
DISCOUNT_PREFIX: str = "C"
DISCOUNT_FACTOR: float = 0.8

# ============================================================================
# PARCEL ID RULE
# ============================================================================

# Advisory only: invalid IDs are logged but still accepted
PARCEL_ID_PATTERN: str = r"^[XC]\d+$"

# ============================================================================
# DISPLAY / REPORT FORMATS
# ============================================================================

REPORT_TIMESTAMP_FORMAT: str = "%Y-%m-%d %H:%M:%S"

NO_CUSTOMERS_TEXT: str = "[No customers in queue]"
NO_PARCELS_TEXT: str = "[No parcels loaded]"
NO_PROCESSED_TEXT: str = "[No parcels processed yet]"

# ============================================================================
# DEBUG FLAGS
# ============================================================================

# Enable debug logging (fee breakdowns, per-line load traces)
FLAG_DEBUG: bool = os.getenv("DEPOT_DEBUG", "").strip().lower() in {"1", "true", "yes"}
