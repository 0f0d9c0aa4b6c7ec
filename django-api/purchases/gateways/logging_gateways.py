"""Gateways that only log the calls they receive.

Default wiring for development and tests. Point ``PURCHASES`` in the
Django settings at real provider adapters in production.
"""

import logging

from purchases.gateways.interfaces import PaymentGateway, SeatReservationGateway

logger = logging.getLogger(__name__)


class LoggingPaymentGateway(PaymentGateway):
    """Accepts every payment."""

    def make_payment(self, account_id: int, amount: int) -> None:
        logger.info("Payment of %s taken from account %s", amount, account_id)


class LoggingSeatReservationGateway(SeatReservationGateway):
    """Accepts every reservation."""

    def reserve_seat(self, account_id: int, seat_count: int) -> None:
        logger.info("Reserved %s seats for account %s", seat_count, account_id)
