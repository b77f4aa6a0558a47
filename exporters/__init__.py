"""
Exporters Package
=================

Snapshot export of depot state.

Classes:
    - DepotExporter: customers / parcels / processed records to CSV or Excel

Usage:
    from exporters import DepotExporter

    exporter = DepotExporter(service, output_path)
    exporter.export("xlsx")
"""

from .depot_exporter import DepotExporter

__all__ = [
    "DepotExporter",
]
