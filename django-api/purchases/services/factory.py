"""Builds a PurchaseService from the ``PURCHASES`` Django setting."""

from django.conf import settings
from django.utils.module_loading import import_string

from purchases.gateways.interfaces import PaymentGateway, SeatReservationGateway
from purchases.services.purchase_service import PurchaseService

DEFAULT_GATEWAYS = {
    "PAYMENT_GATEWAY": "purchases.gateways.LoggingPaymentGateway",
    "SEAT_RESERVATION_GATEWAY": "purchases.gateways.LoggingSeatReservationGateway",
}


def _gateway(name: str) -> PaymentGateway | SeatReservationGateway:
    configured = getattr(settings, "PURCHASES", {})
    return import_string(configured.get(name, DEFAULT_GATEWAYS[name]))()


def build_purchase_service() -> PurchaseService:
    return PurchaseService(
        payment_gateway=_gateway("PAYMENT_GATEWAY"),
        seat_reservation_gateway=_gateway("SEAT_RESERVATION_GATEWAY"),
    )
