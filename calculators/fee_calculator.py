"""Collection fee calculator for depot parcels."""

import logging

from config import DAY_SURCHARGE_RATE, DISCOUNT_PREFIX, DISCOUNT_FACTOR
from models import Parcel


class FeeCalculator:
    """
    Compute the collection fee for a parcel.

    Rules:
    1. base = length * width * height * weight
    2. +1% per day in depot (linear, uncapped)
    3. IDs starting with 'C' get a 20% discount

    Dimensions are not validated; zero or negative inputs flow straight
    through the arithmetic.
    """

    def __init__(
        self,
        day_rate: float = DAY_SURCHARGE_RATE,
        discount_prefix: str = DISCOUNT_PREFIX,
        discount_factor: float = DISCOUNT_FACTOR,
    ):
        """
        Initialize calculator.

        Args:
            day_rate: Surcharge fraction added per day in depot
            discount_prefix: Parcel ID prefix that qualifies for the discount
            discount_factor: Multiplier applied to discounted parcels
        """
        self.day_rate = day_rate
        self.discount_prefix = discount_prefix
        self.discount_factor = discount_factor

    def calculate_fee(self, parcel: Parcel) -> float:
        """
        Calculate the fee for a single parcel.

        Args:
            parcel: Parcel to price

        Returns:
            Fee as an unrounded float

        Examples:
            >>> round(FeeCalculator().calculate_fee(Parcel("C200", 2, 3, 4, 5, 10)), 2)
            105.6
        """
        base_fee = parcel.length * parcel.width * parcel.height * parcel.weight
        logging.debug(f"Base fee for parcel {parcel.parcel_id}: {base_fee}")

        fee = base_fee * (1 + parcel.days_in_depot * self.day_rate)
        logging.debug(f"Day adjusted fee for parcel {parcel.parcel_id}: {fee}")

        if parcel.parcel_id.startswith(self.discount_prefix):
            fee *= self.discount_factor
            logging.debug(f"Applied discount for parcel {parcel.parcel_id}: {fee}")

        return fee
