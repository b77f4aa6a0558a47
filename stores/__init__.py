"""
Stores Package
==============

In-memory containers owned by the depot service.

Classes:
    - ParcelStore: parcel ID -> Parcel table (insert-or-replace)
    - CustomerQueue: FIFO of pending customers
"""

from .parcel_store import ParcelStore
from .customer_queue import CustomerQueue

__all__ = [
    "ParcelStore",
    "CustomerQueue",
]
