from purchases.gateways.interfaces import PaymentGateway, SeatReservationGateway
from purchases.gateways.logging_gateways import (
    LoggingPaymentGateway,
    LoggingSeatReservationGateway,
)

__all__ = [
    "PaymentGateway",
    "SeatReservationGateway",
    "LoggingPaymentGateway",
    "LoggingSeatReservationGateway",
]
