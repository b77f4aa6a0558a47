# test/test_depot_service.py
from __future__ import annotations
import logging

import pytest

from config import NO_CUSTOMERS_TEXT, NO_PARCELS_TEXT, NO_PROCESSED_TEXT


def report_lines(path):
    return path.read_text(encoding="utf-8").splitlines() if path.exists() else []


# ---------- loading ----------
def test_load_customer_round_trip(service, write_file):
    f = write_file("customers.csv", "Alice,x100\n")
    assert service.load_customers(f) == 1
    (c,) = service.pending_customers()
    assert (c.seq_no, c.name, c.parcel_id) == (1, "Alice", "X100")


def test_sequence_numbers_continue_across_loads(service, write_file):
    service.load_customers(write_file("a.csv", "A,X1\nB,X2\n"))
    service.load_customers(write_file("b.csv", "C,X3\n"))
    assert [c.seq_no for c in service.pending_customers()] == [1, 2, 3]


def test_load_parcel_round_trip_and_fee(service, write_file):
    service.load_parcels(write_file("parcels.csv", "c200, 2, 3, 4, 5, 10\n"))
    (p,) = service.parcels()
    assert p.parcel_id == "C200"
    assert (p.length, p.width, p.height, p.weight, p.days_in_depot) == (2, 3, 4, 5, 10)
    assert service.calculator.calculate_fee(p) == pytest.approx(105.6)
    assert service.quote_fee("c200") == pytest.approx(105.6)


def test_load_parcels_upserts(service, write_file):
    service.load_parcels(write_file("parcels.csv", "X1,1,1,1,1,1\nX1,2,2,2,2,2\n"))
    (p,) = service.parcels()
    assert p.length == 2


def test_malformed_lines_do_not_grow_state(service, write_file):
    service.load_customers(write_file("c.csv", "only-one-field\n"))
    service.load_parcels(write_file("p.csv", "X1,1,1,1\nX2,1,x,1,1,1\n"))
    assert service.queue_size() == 0
    assert service.parcels() == ()


def test_unreadable_source_is_not_fatal(service, tmp_path, caplog):
    with caplog.at_level(logging.ERROR):
        assert service.load_customers(tmp_path / "missing.csv") == 0
        assert service.load_parcels(tmp_path / "missing.csv") == 0
    assert "Error loading customers" in caplog.text
    assert "Error loading parcels" in caplog.text


def test_load_writes_event_log(service, event_log, write_file):
    service.load_customers(write_file("c.csv", "Alice,x100\n"))
    service.load_parcels(write_file("p.csv", "X100,1,1,1,1,1\n"))
    entries = event_log.entries()
    assert entries[0].startswith("Loaded Customer: ")
    assert "Alice" in entries[0]
    assert entries[1].startswith("Loaded Parcel: ")


# ---------- process_next_customer ----------
def test_process_success(service, event_log, report_path, write_file):
    service.load_parcels(write_file("p.csv", "C200, 2, 3, 4, 5, 10\n"))
    service.load_customers(write_file("c.csv", "Alice,c200\n"))

    assert service.process_next_customer() is True
    assert service.queue_size() == 0
    assert not service.has_parcel("C200")
    assert service.processed_records() == ("Processed Parcel ID C200 for Alice | Fee: $105.60",)
    assert event_log.entries()[-1] == "Processed Parcel ID C200 for Alice | Fee: $105.60"
    assert report_lines(report_path) == [
        "[2024-03-05 14:07:09] Processed Parcel ID C200 for Alice | Fee: $105.60 (Action: Processed via Worker)"
    ]


def test_process_missing_parcel_discards_customer(service, event_log, report_path, write_file):
    service.load_parcels(write_file("p.csv", "X100,1,1,1,1,1\n"))
    service.load_customers(write_file("c.csv", "Wei,X999\n"))

    assert service.process_next_customer() is False
    assert service.queue_size() == 0
    assert [p.parcel_id for p in service.parcels()] == ["X100"]
    assert service.processed_records() == ()
    assert event_log.entries()[-1] == "Parcel X999 not found for Wei"
    assert report_lines(report_path) == [
        "[2024-03-05 14:07:09] Failed to process Parcel ID X999 for Wei - Parcel not found."
    ]


def test_process_empty_queue_is_noop(service, event_log, report_path, write_file):
    service.load_parcels(write_file("p.csv", "X100,1,1,1,1,1\n"))
    before = service.parcels()

    assert service.process_next_customer() is False
    assert service.process_next_customer() is False
    assert service.parcels() == before
    assert service.processed_records() == ()
    assert service.queue_size() == 0
    assert event_log.entries()[-1] == "No customer left in queue to process."
    assert report_lines(report_path)[-1].endswith("Attempted to process parcel but no customers in queue.")


def test_same_parcel_processed_only_once(service, write_file):
    service.load_parcels(write_file("p.csv", "X1,1,1,1,1,0\n"))
    service.load_customers(write_file("c.csv", "A,X1\nB,x1\n"))
    assert service.process_next_customer() is True
    assert service.process_next_customer() is False
    assert len(service.processed_records()) == 1
    assert service.collect_parcel("C", "X1") is False


# ---------- collect_parcel ----------
def test_collect_success(service, report_path, write_file):
    service.load_parcels(write_file("p.csv", "X100, 1, 2, 3, 4, 0\n"))
    service.load_customers(write_file("c.csv", "Queued,X555\n"))

    assert service.collect_parcel("Bob", "x100") is True
    assert not service.has_parcel("X100")
    assert service.queue_size() == 1  # queue untouched
    (rec,) = service.processed_records()
    assert "Collected Parcel ID X100 by Bob" in rec
    assert rec.endswith("| Fee: $24.00")
    assert report_lines(report_path)[-1].endswith("(Action: Collected via Customer)")


def test_collect_missing(service, event_log, report_path):
    assert service.collect_parcel("Bob", "X404") is False
    assert service.processed_records() == ()
    assert event_log.entries()[-1] == "Parcel X404 not found for collection by Bob"
    assert report_lines(report_path)[-1].endswith(
        "Failed to collect Parcel ID X404 by Bob - Parcel not found."
    )


def test_collect_then_process_hits_not_found(service, write_file):
    service.load_parcels(write_file("p.csv", "X1,1,1,1,1,0\n"))
    service.load_customers(write_file("c.csv", "A,X1\n"))
    assert service.collect_parcel("Bob", "X1") is True
    assert service.process_next_customer() is False
    assert service.queue_size() == 0


def test_report_failure_does_not_stop_processing(event_log, tmp_path, write_file):
    from records import ReportWriter
    from services import DepotService

    svc = DepotService(event_log, ReportWriter(tmp_path))  # unwritable: a directory
    svc.load_parcels(write_file("p.csv", "X1,1,1,1,1,0\n"))
    assert svc.collect_parcel("Bob", "X1") is True
    assert len(svc.processed_records()) == 1


# ---------- interactive intake ----------
def test_add_customer_requires_existing_parcel(service, write_file):
    service.load_parcels(write_file("p.csv", "X1,1,1,1,1,0\n"))
    assert service.add_customer("Ann", "X2") is None
    assert service.add_customer("  ", "X1") is None
    assert service.queue_size() == 0

    c = service.add_customer(" Ann ", "x1")
    assert (c.seq_no, c.name, c.parcel_id) == (1, "Ann", "X1")
    assert service.queue_size() == 1


def test_add_customer_seq_follows_loaded(service, event_log, write_file):
    service.load_parcels(write_file("p.csv", "X1,1,1,1,1,0\nX2,1,1,1,1,0\n"))
    service.load_customers(write_file("c.csv", "A,X1\nB,X1\n"))
    service.process_next_customer()

    c = service.add_customer("Ann", "X2")
    assert c.seq_no == 3
    assert [x.seq_no for x in service.pending_customers()] == [2, 3]
    assert event_log.entries()[-1] == f"Worker added new customer: {c}"


def test_add_parcel_upper_cases_and_logs(service, event_log, caplog):
    with caplog.at_level(logging.WARNING):
        p = service.add_parcel("q7", 1, 2, 3, 4, 5)
    assert p.parcel_id == "Q7"
    assert service.has_parcel("q7")
    assert "does not match" in caplog.text
    assert event_log.entries()[-1].startswith("Worker added new parcel: ")


# ---------- read-only views ----------
def test_empty_listings_use_placeholders(service):
    assert service.customer_listing() == NO_CUSTOMERS_TEXT
    assert service.parcel_listing() == NO_PARCELS_TEXT
    assert service.processed_listing() == NO_PROCESSED_TEXT


def test_listings(service, write_file):
    service.load_parcels(write_file("p.csv", "X1, 2, 3.5, 4, 5, 6\n"))
    service.load_customers(write_file("c.csv", "Alice,X1\n"))
    assert "Alice" in service.customer_listing()
    listing = service.parcel_listing()
    assert listing == "Parcel(ID='X1', LxWxH=2x3.5x4, weight=5, days=6)\n"
    assert "collected" not in listing

    service.process_next_customer()
    assert service.processed_listing().startswith("Processed Parcel ID X1 for Alice")


def test_snapshots_are_immutable_copies(service, write_file):
    service.load_customers(write_file("c.csv", "Alice,X1\n"))
    snap = service.pending_customers()
    assert isinstance(snap, tuple)
    assert isinstance(service.parcels(), tuple)
    assert isinstance(service.processed_records(), tuple)
    with pytest.raises(AttributeError):
        snap.append("x")
    assert service.queue_size() == 1


def test_flush_event_log(service, tmp_path, write_file):
    service.load_customers(write_file("c.csv", "Alice,X1\n"))
    out = tmp_path / "eventsLog.txt"
    assert service.flush_event_log(out) is True
    assert out.read_text(encoding="utf-8").startswith("Loaded Customer: ")


def test_default_collaborators(event_log, report_path):
    from calculators import FeeCalculator
    from loaders import DepotLoader
    from records import ReportWriter
    from services import DepotService

    svc = DepotService(event_log, ReportWriter(report_path))
    assert isinstance(svc.calculator, FeeCalculator)
    assert isinstance(svc.loader, DepotLoader)
