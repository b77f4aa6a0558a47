# depot_gui.py - tkinter desktop form for the parcel depot
import logging
import tkinter as tk
from pathlib import Path
from tkinter import messagebox, simpledialog, ttk
from tkinter.scrolledtext import ScrolledText

from services.depot_service import DepotService
from utils.file_chooser import FileChooser
from views.depot_controller import DepotController


class DepotGui:
    """
    Two tabs:
     - Customer: Collect Parcel
     - Worker: Add Customer, Add Parcel, Process Parcel, Load Customers/Parcels
    plus read-only panes for the customer queue, parcels and processed records.
    """

    def __init__(self, service: DepotService, event_log_path: Path, data_dir: Path = None):
        self.service = service
        self.event_log_path = Path(event_log_path)

        self.root = tk.Tk()
        self.root.title("Depot Application")
        self.root.geometry("900x600")
        self.root.protocol("WM_DELETE_WINDOW", self.on_close)

        self.controller = DepotController(service, self, FileChooser(data_dir, parent=self.root))
        self._build()

    def _build(self):
        style = ttk.Style(self.root)
        style.configure("Depot.TButton", padding=(12, 6))

        notebook = ttk.Notebook(self.root)
        notebook.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        # Customer tab
        customer_tab = ttk.Frame(notebook, padding=10)
        ttk.Button(customer_tab, text="Collect Parcel", style="Depot.TButton",
                   command=self.controller.collect_parcel).pack(pady=20)

        # Worker tab
        worker_tab = ttk.Frame(notebook, padding=10)
        buttons = ttk.Frame(worker_tab)
        buttons.pack(side=tk.TOP, fill=tk.X)
        for text, cmd in (
            ("Add Customer", self.controller.add_customer),
            ("Add Parcel", self.controller.add_parcel),
            ("Process Parcel", self.controller.process_next),
            ("Load Customers…", self.controller.load_customers),
            ("Load Parcels…", self.controller.load_parcels),
        ):
            ttk.Button(buttons, text=text, style="Depot.TButton", command=cmd).pack(side=tk.LEFT, padx=5, pady=5)

        panes = ttk.Frame(worker_tab)
        panes.pack(fill=tk.BOTH, expand=True, pady=(10, 0))
        self.txt_customers = self._text_pane(panes, "Customer List", 0)
        self.txt_parcels = self._text_pane(panes, "Parcel List", 1)
        self.txt_processed = self._text_pane(panes, "Processed List", 2)

        notebook.add(customer_tab, text="Customer")
        notebook.add(worker_tab, text="Worker")

    @staticmethod
    def _text_pane(parent, title: str, column: int) -> ScrolledText:
        parent.columnconfigure(column, weight=1)
        parent.rowconfigure(1, weight=1)
        ttk.Label(parent, text=title, anchor=tk.CENTER).grid(row=0, column=column, sticky="ew")
        txt = ScrolledText(parent, wrap=tk.WORD, width=30, state=tk.DISABLED)
        txt.grid(row=1, column=column, sticky="nsew", padx=5)
        return txt

    # ---- view surface used by DepotController ----
    def refresh(self):
        for widget, text in (
            (self.txt_customers, self.service.customer_listing()),
            (self.txt_parcels, self.service.parcel_listing()),
            (self.txt_processed, self.service.processed_listing()),
        ):
            widget.configure(state=tk.NORMAL)
            widget.delete("1.0", tk.END)
            widget.insert(tk.END, text)
            widget.configure(state=tk.DISABLED)

    def prompt_text(self, message: str):
        return simpledialog.askstring("Depot", message, parent=self.root)

    def prompt_number(self, message: str):
        # askfloat re-prompts on non-numeric input; None means cancelled
        return simpledialog.askfloat("Depot", message, parent=self.root)

    def show_message(self, msg: str):
        messagebox.showinfo("Depot", msg, parent=self.root)

    def show_error(self, msg: str):
        messagebox.showerror("Error", msg, parent=self.root)

    # ---- lifecycle ----
    def on_close(self):
        if not self.service.flush_event_log(self.event_log_path):
            logging.error("Event log could not be written on exit.")
        self.root.destroy()

    def run(self):
        self.refresh()
        self.root.mainloop()
