from .depot_service import DepotService

__all__ = ["DepotService"]
