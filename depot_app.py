# depot_app.py
from __future__ import annotations
import argparse
import logging
from pathlib import Path

from config import (
    CUSTOMERS_FILE,
    PARCELS_FILE,
    EVENT_LOG_FILE,
    REPORT_FILE,
    EXPORT_DIR,
    FLAG_DEBUG,
)
from records import EventLog, ReportWriter
from services import DepotService


def build_service(event_log: EventLog, report_path: Path) -> DepotService:
    return DepotService(event_log, ReportWriter(report_path))


# ---- console (batch) mode ----
def run_console(args) -> DepotService:
    print("Running in CONSOLE mode...")
    event_log = EventLog()
    service = build_service(event_log, args.report)
    service.load_customers(args.customers)
    service.load_parcels(args.parcels)

    while service.has_pending_customers():
        service.process_next_customer()

    service.flush_event_log(args.log)

    if args.export:
        from exporters import DepotExporter
        written = DepotExporter(service, args.export).export(args.format)
        print(f"📝 Snapshot exported to: {', '.join(str(p) for p in written)}")

    print(f"✅ All customers processed ({len(service.processed_records())} parcel(s) released). "
          f"Log written to {args.log}.")
    return service


# ---- GUI mode ----
def run_gui(args) -> None:
    print("Running in GUI mode...")
    from views.depot_gui import DepotGui

    event_log = EventLog()
    service = build_service(event_log, args.report)
    service.load_customers(args.customers)
    service.load_parcels(args.parcels)
    DepotGui(service, args.log, data_dir=Path(args.customers).parent).run()


# ---- CLI ----
def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Parcel Depot")
    ap.add_argument("--customers", type=Path, default=CUSTOMERS_FILE, help="Customers file (name,parcel_id)")
    ap.add_argument("--parcels", type=Path, default=PARCELS_FILE, help="Parcels file (id,L,W,H,weight,days)")
    ap.add_argument("--log", type=Path, default=EVENT_LOG_FILE, help="Event log output (overwritten)")
    ap.add_argument("--report", type=Path, default=REPORT_FILE, help="Report file (appended)")
    ap.add_argument("--debug", action="store_true", default=FLAG_DEBUG, help="Verbose logging")
    ap.set_defaults(cmd="gui", export=None, format="csv")

    sub = ap.add_subparsers(dest="cmd")
    c = sub.add_parser("console", help="Load, process every queued customer, write the event log.")
    c.add_argument("--export", type=Path, nargs="?", const=EXPORT_DIR,
                   help=f"Also export a snapshot (default dir: {EXPORT_DIR})")
    c.add_argument("--format", choices=("csv", "xlsx"), default="csv", help="Snapshot format")
    sub.add_parser("gui", help="Open the depot form.")
    return ap


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
    )
    if args.cmd == "console":
        run_console(args)
    else:
        run_gui(args)


if __name__ == "__main__":
    main()
