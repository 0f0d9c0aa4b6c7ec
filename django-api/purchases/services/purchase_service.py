"""Purchase service - all business logic lives here.

Services:
- Depend only on interfaces (gateways)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
from collections.abc import Iterable

from purchases.domain.errors import (
    AdultTicketRequiredError,
    EmptyPurchaseError,
    InvalidAccountIdError,
    InvalidPurchaseError,
    InvalidTicketQuantityError,
    NegativeTicketQuantityError,
    TicketLimitExceededError,
    UnknownTicketCategoryError,
)
from purchases.domain.models import PurchaseOutcome, PurchaseRequest, TicketLineItem
from purchases.domain.rules import SEATED_CATEGORIES, TICKET_PRICES, PurchaseLimits
from purchases.domain.value_objects import AccountId, Money, SeatCount, TicketCategory
from purchases.gateways.interfaces import PaymentGateway, SeatReservationGateway

logger = logging.getLogger(__name__)


class PurchaseService:
    """Validates ticket purchases and drives payment and seat reservation."""

    def __init__(
        self,
        payment_gateway: PaymentGateway,
        seat_reservation_gateway: SeatReservationGateway,
    ) -> None:
        self._payment_gateway = payment_gateway
        self._seat_reservation_gateway = seat_reservation_gateway

    def purchase_tickets(
        self, account_id: int | None, line_items: Iterable[TicketLineItem]
    ) -> PurchaseOutcome:
        """Validate the request, take payment, then reserve seats.

        Payment is taken before seats are reserved. If the reservation
        fails after payment succeeded, the error propagates and nothing
        is refunded.

        Raises:
            InvalidPurchaseError: If any validation rule fails. Neither
                gateway is called in that case.
        """
        try:
            request = self._build_request(account_id, line_items)
            outcome = PurchaseOutcome(
                account_id=request.account_id,
                total_cost=self._calculate_total_cost(request),
                seats_to_reserve=self._calculate_seats(request),
            )
        except InvalidPurchaseError as exc:
            logger.warning(
                "Purchase rejected for account %r: %s", account_id, exc.code.value
            )
            raise

        self._payment_gateway.make_payment(
            outcome.account_id.value, outcome.total_cost.amount
        )
        self._seat_reservation_gateway.reserve_seat(
            outcome.account_id.value, outcome.seats_to_reserve.value
        )
        logger.info(
            "Purchase completed for account %s: cost=%s seats=%s",
            outcome.account_id.value,
            outcome.total_cost,
            outcome.seats_to_reserve.value,
        )
        return outcome

    def _build_request(
        self, account_id: int | None, line_items: Iterable[TicketLineItem]
    ) -> PurchaseRequest:
        try:
            valid_account_id = AccountId.from_raw(account_id)
        except ValueError as exc:
            raise InvalidAccountIdError() from exc

        request = PurchaseRequest(account_id=valid_account_id, line_items=tuple(line_items))
        if not request.line_items:
            raise EmptyPurchaseError()

        for item in request.line_items:
            if isinstance(item.quantity, bool) or not isinstance(item.quantity, int):
                raise InvalidTicketQuantityError(item.quantity)
            if item.quantity < 0:
                raise NegativeTicketQuantityError(item.quantity)

        # Same-category line items are summed before the limits apply.
        if request.total_quantity() > PurchaseLimits.MAX_TICKETS_PER_PURCHASE:
            raise TicketLimitExceededError(PurchaseLimits.MAX_TICKETS_PER_PURCHASE)

        if request.quantity_of(TicketCategory.ADULT) < PurchaseLimits.MIN_ADULT_TICKETS:
            raise AdultTicketRequiredError()

        return request

    def _calculate_total_cost(self, request: PurchaseRequest) -> Money:
        total = Money(0)
        for item in request.line_items:
            try:
                unit_price = TICKET_PRICES[item.category]
            except KeyError as exc:
                raise UnknownTicketCategoryError(item.category) from exc
            total = total + unit_price.times(item.quantity)
        return total

    def _calculate_seats(self, request: PurchaseRequest) -> SeatCount:
        return SeatCount(
            sum(item.quantity for item in request.line_items if item.category in SEATED_CATEGORIES)
        )
