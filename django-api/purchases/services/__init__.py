from purchases.services.factory import build_purchase_service
from purchases.services.purchase_service import PurchaseService

__all__ = ["PurchaseService", "build_purchase_service"]
