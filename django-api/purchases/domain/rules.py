"""Business constants for ticket purchases."""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Final

from purchases.domain.value_objects import Money, TicketCategory


class PurchaseLimits:
    """Per-request purchase limits."""

    MAX_TICKETS_PER_PURCHASE: Final[int] = 25
    MIN_ADULT_TICKETS: Final[int] = 1


TICKET_PRICES: Final[Mapping[TicketCategory, Money]] = MappingProxyType(
    {
        TicketCategory.ADULT: Money(25),
        TicketCategory.CHILD: Money(15),
        TicketCategory.INFANT: Money(0),
    }
)

# Infants sit on an adult's lap.
SEATED_CATEGORIES: Final[frozenset[TicketCategory]] = frozenset(
    {TicketCategory.ADULT, TicketCategory.CHILD}
)
