"""Depot service: customer queue intake, parcel lookup, fees and logging."""

import logging
from pathlib import Path
from typing import List, Optional, Tuple

from calculators.fee_calculator import FeeCalculator
from config import NO_CUSTOMERS_TEXT, NO_PARCELS_TEXT, NO_PROCESSED_TEXT
from loaders.depot_loader import DepotLoader
from models import Customer, Parcel
from records.event_log import EventLog
from records.report_writer import ReportWriter
from stores.customer_queue import CustomerQueue
from stores.parcel_store import ParcelStore
from utils.helpers import fmt_dims, fmt_num, fmt_money, is_blank


class DepotService:
    """
    Orchestrate the depot workflow.

    Handles:
    - Loading customers (queued) and parcels (upserted) from text files
    - Serving the next queued customer: lookup, fee, removal
    - Direct collection of a parcel outside the queue
    - Writing every outcome to the event log and the timestamped report

    A parcel is removed from the store the moment it is processed or
    collected, so the same ID can never be charged twice.

    Attributes:
        event_log: Shared EventLog (injected)
        report: ReportWriter for the append-only report
        calculator: FeeCalculator used for every fee
        loader: DepotLoader used by the load operations
    """

    def __init__(
        self,
        event_log: EventLog,
        report: ReportWriter,
        calculator: Optional[FeeCalculator] = None,
        loader: Optional[DepotLoader] = None,
    ):
        self.event_log = event_log
        self.report = report
        self.calculator = calculator or FeeCalculator()
        self.loader = loader or DepotLoader()

        self._queue = CustomerQueue()
        self._store = ParcelStore()
        self._processed: List[str] = []
        self._next_seq = 1

    # ----------------------
    # Loading
    # ----------------------
    def load_customers(self, source) -> int:
        """
        Load ``name,parcel_id`` lines and enqueue each customer.

        Args:
            source: Customer file path

        Returns:
            Number of customers loaded (0 if the file is unreadable)
        """
        try:
            records = self.loader.load_customer_records(source)
        except OSError as e:
            logging.error(f"Error loading customers from {source}: {e}")
            return 0

        for name, parcel_id in records:
            customer = self._enqueue(name, parcel_id)
            self.event_log.add_entry(f"Loaded Customer: {customer}")
            logging.debug(f"Loaded Customer: {customer}")

        logging.info(f"Total Customers Loaded: {len(records)}")
        return len(records)

    def load_parcels(self, source) -> int:
        """
        Load ``id,length,width,height,weight,days`` lines into the store.

        A later line with an existing ID replaces the earlier parcel.

        Args:
            source: Parcel file path

        Returns:
            Number of parcel lines accepted (0 if the file is unreadable)
        """
        try:
            parcels = self.loader.load_parcel_records(source)
        except OSError as e:
            logging.error(f"Error loading parcels from {source}: {e}")
            return 0

        for parcel in parcels:
            self._store.put(parcel)
            self.event_log.add_entry(f"Loaded Parcel: {parcel}")
            logging.debug(f"Loaded Parcel: {parcel}")

        logging.info(f"Total Parcels Loaded: {len(parcels)}")
        return len(parcels)

    # ----------------------
    # Interactive intake
    # ----------------------
    def add_customer(self, name: str, parcel_id: str) -> Optional[Customer]:
        """
        Queue a new customer for a parcel that is currently in the depot.

        Returns:
            The queued Customer, or None if the input is blank or the
            parcel ID is unknown (nothing is queued in that case)
        """
        if is_blank(name) or is_blank(parcel_id):
            logging.warning("Customer name and parcel ID are required.")
            return None
        name = name.strip()
        pid = parcel_id.strip().upper()
        if not self._store.contains(pid):
            logging.warning(f"Parcel ID {pid} doesn't exist in the parcel list.")
            return None

        customer = self._enqueue(name, pid)
        self.event_log.add_entry(f"Worker added new customer: {customer}")
        return customer

    def add_parcel(
        self,
        parcel_id: str,
        length: float,
        width: float,
        height: float,
        weight: float,
        days: int,
    ) -> Parcel:
        """Insert (or replace) a parcel entered by a worker."""
        parcel = Parcel(parcel_id.strip().upper(), length, width, height, weight, int(days))
        if not parcel.is_valid_id():
            logging.warning(f"Parcel ID '{parcel.parcel_id}' does not match the X/C + digits format.")
        self._store.put(parcel)
        self.event_log.add_entry(f"Worker added new parcel: {parcel}")
        return parcel

    def _enqueue(self, name: str, parcel_id: str) -> Customer:
        customer = Customer(self._next_seq, name, parcel_id)
        self._next_seq += 1
        self._queue.enqueue(customer)
        return customer

    # ----------------------
    # Processing
    # ----------------------
    def process_next_customer(self) -> bool:
        """
        Serve the customer at the head of the queue.

        The customer is dequeued whether or not their parcel exists; a
        missing parcel is recorded as a failure and the request is dropped.

        Returns:
            True if a parcel was released, False otherwise
        """
        customer = self._queue.dequeue()
        if customer is None:
            msg = "No customer left in queue to process."
            self.event_log.add_entry(msg)
            logging.info(msg)
            self.report.write("Attempted to process parcel but no customers in queue.")
            return False

        logging.info(f"Processing Customer: {customer}")
        pid = customer.parcel_id.upper()
        parcel = self._store.get(pid)
        if parcel is None:
            msg = f"Parcel {pid} not found for {customer.name}"
            self.event_log.add_entry(msg)
            logging.warning(msg)
            self.report.write(f"Failed to process Parcel ID {pid} for {customer.name} - Parcel not found.")
            return False

        record = self._release(parcel, f"Processed Parcel ID {pid} for {customer.name}")
        self.report.write(f"{record} (Action: Processed via Worker)")
        return True

    def collect_parcel(self, customer_name: str, parcel_id: str) -> bool:
        """
        Release a parcel directly, bypassing the customer queue.

        Args:
            customer_name: Name of the person collecting
            parcel_id: Parcel ID (case-insensitive)

        Returns:
            True if the parcel was collected, False if it is not in the depot
        """
        pid = parcel_id.strip().upper()
        parcel = self._store.get(pid)
        if parcel is None:
            msg = f"Parcel {pid} not found for collection by {customer_name}"
            self.event_log.add_entry(msg)
            logging.warning(msg)
            self.report.write(f"Failed to collect Parcel ID {pid} by {customer_name} - Parcel not found.")
            return False

        record = self._release(parcel, f"Collected Parcel ID {pid} by {customer_name}")
        self.report.write(f"{record} (Action: Collected via Customer)")
        return True

    def _release(self, parcel: Parcel, action: str) -> str:
        """Charge the parcel, drop it from the store and record the event."""
        fee = self.calculator.calculate_fee(parcel)
        self._store.remove(parcel.parcel_id)

        record = f"{action} | Fee: ${fmt_money(fee)}"
        self._processed.append(record)
        self.event_log.add_entry(record)
        logging.info(record)
        return record

    def quote_fee(self, parcel_id: str) -> Optional[float]:
        """Fee the parcel would be charged now, without releasing it."""
        parcel = self._store.get(parcel_id.strip().upper())
        return None if parcel is None else self.calculator.calculate_fee(parcel)

    def flush_event_log(self, path) -> bool:
        return self.event_log.flush_to_file(Path(path))

    # ----------------------
    # Read-only views
    # ----------------------
    def pending_customers(self) -> Tuple[Customer, ...]:
        return self._queue.snapshot()

    def parcels(self) -> Tuple[Parcel, ...]:
        return self._store.all()

    def processed_records(self) -> Tuple[str, ...]:
        return tuple(self._processed)

    def queue_size(self) -> int:
        return self._queue.size()

    def has_pending_customers(self) -> bool:
        return not self._queue.is_empty()

    def has_parcel(self, parcel_id: str) -> bool:
        return self._store.contains(parcel_id.strip().upper())

    def customer_listing(self) -> str:
        customers = self._queue.snapshot()
        if not customers:
            return NO_CUSTOMERS_TEXT
        return "".join(f"{c}\n" for c in customers)

    def parcel_listing(self) -> str:
        parcels = self._store.all()
        if not parcels:
            return NO_PARCELS_TEXT
        return "".join(f"{self._format_parcel(p)}\n" for p in parcels)

    def processed_listing(self) -> str:
        if not self._processed:
            return NO_PROCESSED_TEXT
        return "".join(f"{r}\n" for r in self._processed)

    @staticmethod
    def _format_parcel(p: Parcel) -> str:
        # display omits the collected flag
        return (f"Parcel(ID='{p.parcel_id}', LxWxH={fmt_dims(p.length, p.width, p.height)}, "
                f"weight={fmt_num(p.weight)}, days={p.days_in_depot})")
