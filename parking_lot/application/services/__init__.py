from .lot_service import LotService

__all__ = ["LotService"]
