from purchases.domain.models import PurchaseOutcome, PurchaseRequest, TicketLineItem
from purchases.domain.value_objects import AccountId, Money, SeatCount, TicketCategory

__all__ = [
    "PurchaseOutcome",
    "PurchaseRequest",
    "TicketLineItem",
    "AccountId",
    "Money",
    "SeatCount",
    "TicketCategory",
]
