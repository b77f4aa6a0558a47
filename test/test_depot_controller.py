# test/test_depot_controller.py
from __future__ import annotations
import types

import pytest

from views import DepotController


# ---------- tiny view helper ----------
class FakeView:
    """Answers prompts from a script and records what the user was shown."""

    def __init__(self, texts=(), numbers=()):
        self.texts = list(texts)
        self.numbers = list(numbers)
        self.messages = []
        self.errors = []
        self.refreshes = 0

    def prompt_text(self, message):
        return self.texts.pop(0)

    def prompt_number(self, message):
        return self.numbers.pop(0)

    def show_message(self, msg):
        self.messages.append(msg)

    def show_error(self, msg):
        self.errors.append(msg)

    def refresh(self):
        self.refreshes += 1


# ---------- fixtures ----------
@pytest.fixture
def stocked(service, write_file):
    service.load_parcels(write_file("p.csv", "X100, 1, 2, 3, 4, 0\n"))
    return service


def make(service, **kw):
    view = FakeView(**kw)
    return DepotController(service, view, chooser=types.SimpleNamespace()), view


# ---------- collect ----------
def test_collect_success(stocked):
    ctl, view = make(stocked, texts=["x100", "Bob"])
    assert ctl.collect_parcel() is True
    assert view.messages == ["Parcel x100 has been collected by Bob."]
    assert view.refreshes == 1
    assert not stocked.has_parcel("X100")


def test_collect_not_found(stocked):
    ctl, view = make(stocked, texts=["X9", "Bob"])
    assert ctl.collect_parcel() is False
    assert view.errors == ["Parcel X9 not found!"]
    assert view.refreshes == 1


@pytest.mark.parametrize("texts", [[None], ["  "], ["X100", None], ["X100", ""]])
def test_collect_cancelled_leaves_state(stocked, texts):
    ctl, view = make(stocked, texts=texts)
    assert ctl.collect_parcel() is False
    assert view.errors and "Cancelled" in view.errors[0]
    assert stocked.has_parcel("X100")
    assert stocked.processed_records() == ()


# ---------- add customer ----------
def test_add_customer(stocked):
    ctl, view = make(stocked, texts=["Ann", "x100"])
    assert ctl.add_customer() is True
    assert stocked.pending_customers()[0].parcel_id == "X100"
    assert view.messages == ["Customer Ann added successfully!"]


def test_add_customer_unknown_parcel(stocked):
    ctl, view = make(stocked, texts=["Ann", "X404"])
    assert ctl.add_customer() is False
    assert view.errors == ["Parcel ID X404 doesn't exist in the parcel list."]
    assert stocked.queue_size() == 0


def test_add_customer_cancel(stocked):
    ctl, view = make(stocked, texts=[None])
    assert ctl.add_customer() is False
    assert stocked.queue_size() == 0


# ---------- add parcel ----------
def test_add_parcel(service):
    ctl, view = make(service, texts=["c300"], numbers=[1.0, 2.0, 3.0, 4.0, 5.0])
    assert ctl.add_parcel() is True
    (p,) = service.parcels()
    assert (p.parcel_id, p.days_in_depot) == ("C300", 5)
    assert view.messages == ["Parcel C300 added successfully."]


def test_add_parcel_cancel_midway(service):
    ctl, view = make(service, texts=["X1"], numbers=[1.0, None])
    assert ctl.add_parcel() is False
    assert service.parcels() == ()


def test_add_parcel_negative_aborts(service):
    ctl, view = make(service, texts=["X1"], numbers=[1.0, 2.0, -3.0])
    assert ctl.add_parcel() is False
    assert service.parcels() == ()
    assert "Negative" in view.errors[0]


# ---------- process ----------
def test_process_empty_queue_shows_error(service):
    ctl, view = make(service)
    assert ctl.process_next() is False
    assert view.errors == ["No customers in queue to process."]
    assert service.processed_records() == ()


def test_process_next(stocked, write_file):
    stocked.load_customers(write_file("c.csv", "Alice,X100\nBob,X404\n"))
    ctl, view = make(stocked)
    assert ctl.process_next() is True
    assert view.messages == ["Processed the next customer in the queue."]
    assert ctl.process_next() is False
    assert "discarded" in view.errors[0]
    assert stocked.queue_size() == 0


# ---------- file loading ----------
def test_load_files_via_chooser(service, write_file):
    cust = write_file("customers.csv", "Alice,X1\n")
    parc = write_file("parcels.csv", "X1,1,1,1,1,1\n")
    chooser = types.SimpleNamespace(
        pick_customer_file=lambda **kw: cust,
        pick_parcel_file=lambda **kw: parc,
    )
    view = FakeView()
    ctl = DepotController(service, view, chooser=chooser)

    assert ctl.load_customers() == 1
    assert ctl.load_parcels() == 1
    assert view.messages == [
        "Loaded 1 customer(s) from customers.csv.",
        "Loaded 1 parcel(s) from parcels.csv.",
    ]


def test_load_cancelled(service):
    chooser = types.SimpleNamespace(pick_customer_file=lambda **kw: None)
    view = FakeView()
    ctl = DepotController(service, view, chooser=chooser)
    assert ctl.load_customers() == 0
    assert view.messages == [] and view.refreshes == 0
