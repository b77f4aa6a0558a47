import re

from config import PARCEL_ID_PATTERN


class Parcel:
    def __init__(self, parcel_id: str = "", length: float = 0.0, width: float = 0.0,
                 height: float = 0.0, weight: float = 0.0, days_in_depot: int = 0,
                 collected: bool = False):
        self._parcel_id = parcel_id
        self.length = length
        self.width = width
        self.height = height
        self.weight = weight
        self.days_in_depot = days_in_depot
        # Kept for data-shape compatibility; nothing flips it today
        self.collected = collected

    @property
    def parcel_id(self) -> str:
        return self._parcel_id

    def is_valid_id(self) -> bool:
        """True when the ID is 'X' or 'C' followed by one or more digits."""
        return re.match(PARCEL_ID_PATTERN, self._parcel_id) is not None

    def __repr__(self):
        return (f"Parcel(ID='{self._parcel_id}', dim={self.length}x{self.width}x{self.height}, "
                f"weight={self.weight}, days_in_depot={self.days_in_depot}, collected={self.collected})")


class Customer:
    def __init__(self, seq_no: int = 0, name: str = "", parcel_id: str = ""):
        self.seq_no = seq_no
        self.name = name
        self.parcel_id = parcel_id

    def __repr__(self):
        return f"Customer(seq={self.seq_no}, name='{self.name}', parcel_id='{self.parcel_id}')"
