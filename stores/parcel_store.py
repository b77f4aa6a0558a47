"""Parcel table keyed by parcel ID."""

from typing import Dict, Optional, Tuple

from models import Parcel


class ParcelStore:
    """
    Key-value table of parcel ID -> Parcel.

    IDs are used exactly as given; callers upper-case them first.
    Iteration follows insertion order (an overwrite keeps its first slot).
    """

    def __init__(self):
        self._parcels: Dict[str, Parcel] = {}

    def put(self, parcel: Parcel) -> None:
        """Insert or replace by ID (last write wins)."""
        self._parcels[parcel.parcel_id] = parcel

    def get(self, parcel_id: str) -> Optional[Parcel]:
        return self._parcels.get(parcel_id)

    def contains(self, parcel_id: str) -> bool:
        return parcel_id in self._parcels

    def remove(self, parcel_id: str) -> None:
        """Delete if present; unknown IDs are ignored."""
        self._parcels.pop(parcel_id, None)

    def all(self) -> Tuple[Parcel, ...]:
        return tuple(self._parcels.values())

    def __len__(self):
        return len(self._parcels)
