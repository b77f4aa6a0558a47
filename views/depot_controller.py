"""User actions behind the depot form, independent of the UI toolkit."""

import logging
from typing import Optional

from services.depot_service import DepotService
from utils.file_chooser import FileChooser
from utils.helpers import is_blank


class DepotController:
    """
    Interactive depot actions.

    Each action gathers input through ``view``, calls exactly one
    DepotService operation, then refreshes the view. Cancelled or invalid
    input aborts the action without touching the service.

    ``view`` must provide: prompt_text(msg) -> str | None,
    prompt_number(msg) -> float | None, show_message(msg),
    show_error(msg), refresh().
    """

    def __init__(self, service: DepotService, view, chooser: Optional[FileChooser] = None):
        self.service = service
        self.view = view
        self.chooser = chooser or FileChooser()

    # ----------------------
    # Customer tab
    # ----------------------
    def collect_parcel(self) -> bool:
        parcel_id = self.view.prompt_text("Enter parcel ID:")
        if is_blank(parcel_id):
            self.view.show_error("No parcel ID entered. Cancelled.")
            return False
        name = self.view.prompt_text("Enter customer name:")
        if is_blank(name):
            self.view.show_error("No customer name entered. Cancelled.")
            return False

        parcel_id, name = parcel_id.strip(), name.strip()
        ok = self.service.collect_parcel(name, parcel_id)
        if ok:
            self.view.show_message(f"Parcel {parcel_id} has been collected by {name}.")
        else:
            self.view.show_error(f"Parcel {parcel_id} not found!")
        self.view.refresh()
        return ok

    # ----------------------
    # Worker tab
    # ----------------------
    def add_customer(self) -> bool:
        name = self.view.prompt_text("Enter customer name:")
        if is_blank(name):
            self.view.show_error("No customer name entered.")
            return False
        parcel_id = self.view.prompt_text("Enter parcel ID:")
        if is_blank(parcel_id):
            self.view.show_error("No parcel ID entered.")
            return False

        customer = self.service.add_customer(name, parcel_id)
        if customer is None:
            self.view.show_error(f"Parcel ID {parcel_id.strip()} doesn't exist in the parcel list.")
            return False
        self.view.refresh()
        self.view.show_message(f"Customer {customer.name} added successfully!")
        return True

    def add_parcel(self) -> bool:
        parcel_id = self.view.prompt_text("Enter parcel ID:")
        if is_blank(parcel_id):
            self.view.show_error("No parcel ID entered.")
            return False

        values = []
        for label in ("length", "width", "height", "weight"):
            v = self._prompt_non_negative(f"Enter parcel {label}:")
            if v is None:
                return False
            values.append(v)
        days = self._prompt_non_negative("Enter days in depot:")
        if days is None:
            return False

        parcel = self.service.add_parcel(parcel_id, *values, int(days))
        self.view.refresh()
        self.view.show_message(f"Parcel {parcel.parcel_id} added successfully.")
        return True

    def process_next(self) -> bool:
        if not self.service.has_pending_customers():
            self.view.show_error("No customers in queue to process.")
            return False

        ok = self.service.process_next_customer()
        if ok:
            self.view.show_message("Processed the next customer in the queue.")
        else:
            self.view.show_error("The next customer's parcel was not found; the request was discarded.")
        self.view.refresh()
        return ok

    def _prompt_non_negative(self, message: str) -> Optional[float]:
        value = self.view.prompt_number(message)
        if value is None:
            return None
        if value < 0:
            self.view.show_error(f"Negative value not allowed: {value}")
            return None
        return value

    # ----------------------
    # File loading
    # ----------------------
    def load_customers(self) -> int:
        path = self.chooser.pick_customer_file(interactive=True, cli_fallback=False)
        if path is None:
            logging.info("Customer file selection cancelled.")
            return 0
        count = self.service.load_customers(path)
        self.view.refresh()
        self.view.show_message(f"Loaded {count} customer(s) from {path.name}.")
        return count

    def load_parcels(self) -> int:
        path = self.chooser.pick_parcel_file(interactive=True, cli_fallback=False)
        if path is None:
            logging.info("Parcel file selection cancelled.")
            return 0
        count = self.service.load_parcels(path)
        self.view.refresh()
        self.view.show_message(f"Loaded {count} parcel(s) from {path.name}.")
        return count
