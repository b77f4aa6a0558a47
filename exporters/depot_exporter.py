"""
Depot Exporter Module
=====================

Flattens the current depot state to pandas DataFrames and writes
snapshot files for spreadsheets or downstream tooling.

Outputs (one file each):
- customers: pending queue in service order
- parcels: parcels still in the depot, with a quoted fee
- processed: processed/collected records in the order they happened
"""

import logging
from pathlib import Path
from typing import List

import pandas as pd

from services.depot_service import DepotService


class DepotExporter:
    """
    Snapshot exporter for a DepotService.

    Attributes:
        service: Depot service to read from (never mutated)
        output_path: Directory for output files
    """

    SUPPORTED_FORMATS = ("csv", "xlsx")

    def __init__(self, service: DepotService, output_path: Path):
        """
        Initialize exporter.

        Args:
            service: Depot service whose state is exported
            output_path: Directory where export files will be saved
        """
        self.service = service
        self.output_path = Path(output_path)

    # ----------------------
    # Flatteners
    # ----------------------
    def customers_frame(self) -> pd.DataFrame:
        rows = [
            {"seq": c.seq_no, "name": c.name, "parcel_id": c.parcel_id}
            for c in self.service.pending_customers()
        ]
        return pd.DataFrame(rows, columns=["seq", "name", "parcel_id"])

    def parcels_frame(self) -> pd.DataFrame:
        """One row per parcel in the depot; ``quoted_fee`` is rounded to cents."""
        calc = self.service.calculator
        rows = [
            {
                "parcel_id": p.parcel_id,
                "length": p.length,
                "width": p.width,
                "height": p.height,
                "weight": p.weight,
                "days_in_depot": p.days_in_depot,
                "valid_id": p.is_valid_id(),
                "quoted_fee": round(calc.calculate_fee(p), 2),
            }
            for p in self.service.parcels()
        ]
        return pd.DataFrame(rows, columns=[
            "parcel_id", "length", "width", "height", "weight",
            "days_in_depot", "valid_id", "quoted_fee",
        ])

    def processed_frame(self) -> pd.DataFrame:
        return pd.DataFrame({"record": list(self.service.processed_records())})

    # ----------------------
    # Export
    # ----------------------
    def export(self, fmt: str = "csv") -> List[Path]:
        """
        Write customers, parcels and processed snapshots.

        Args:
            fmt: "csv" or "xlsx"

        Returns:
            Paths of the written files

        Raises:
            ValueError: If fmt is not supported
        """
        fmt = fmt.lower()
        if fmt not in self.SUPPORTED_FORMATS:
            raise ValueError(f"Unsupported export format '{fmt}'. Use one of {self.SUPPORTED_FORMATS}.")

        self.output_path.mkdir(parents=True, exist_ok=True)
        frames = {
            "customers": self.customers_frame(),
            "parcels": self.parcels_frame(),
            "processed": self.processed_frame(),
        }

        written: List[Path] = []
        for name, df in frames.items():
            out_file = self.output_path / f"{name}.{fmt}"
            if fmt == "csv":
                df.to_csv(out_file, index=False)
            else:
                df.to_excel(out_file, index=False)
            written.append(out_file)
            logging.info(f"Exported {len(df)} {name} row(s) to {out_file}")
        return written
