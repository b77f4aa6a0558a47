from .depot_loader import DepotLoader

__all__ = ["DepotLoader"]
