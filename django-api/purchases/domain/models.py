"""Domain models for a single purchase.

Nothing here is persisted: every object lives for one call to the
purchase service and is discarded afterwards.
"""

from dataclasses import dataclass

from purchases.domain.value_objects import AccountId, Money, SeatCount, TicketCategory


@dataclass(frozen=True)
class TicketLineItem:
    """A quantity of tickets of one category.

    The quantity is not checked here; the purchase service rejects
    negative quantities as part of request validation.
    """

    category: TicketCategory
    quantity: int


@dataclass(frozen=True)
class PurchaseRequest:
    """An account and the line items it wants to buy."""

    account_id: AccountId
    line_items: tuple[TicketLineItem, ...]

    def total_quantity(self) -> int:
        return sum(item.quantity for item in self.line_items)

    def quantity_of(self, category: TicketCategory) -> int:
        """Summed quantity across every line item of ``category``."""
        return sum(item.quantity for item in self.line_items if item.category is category)


@dataclass(frozen=True)
class PurchaseOutcome:
    """Derived totals of an accepted purchase."""

    account_id: AccountId
    total_cost: Money
    seats_to_reserve: SeatCount
