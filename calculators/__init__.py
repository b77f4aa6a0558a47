from .fee_calculator import FeeCalculator

__all__ = ["FeeCalculator"]
