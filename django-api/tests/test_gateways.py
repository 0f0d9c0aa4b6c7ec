"""Tests for the default gateways and settings-driven wiring.

Run with: pytest tests/test_gateways.py -v
"""

import logging

import pytest

from purchases.gateways import (
    LoggingPaymentGateway,
    LoggingSeatReservationGateway,
    PaymentGateway,
    SeatReservationGateway,
)
from purchases.services import PurchaseService, build_purchase_service


class RecordingPaymentGateway(PaymentGateway):
    def make_payment(self, account_id: int, amount: int) -> None:
        pass


class RecordingSeatReservationGateway(SeatReservationGateway):
    def reserve_seat(self, account_id: int, seat_count: int) -> None:
        pass


class TestLoggingGateways:
    """The default gateways accept every call and log it."""

    def test_payment_is_logged(self, caplog):
        """LoggingPaymentGateway logs the amount and account."""
        with caplog.at_level(logging.INFO, logger="purchases"):
            LoggingPaymentGateway().make_payment(4, 460)

        assert "Payment of 460 taken from account 4" in caplog.text

    def test_reservation_is_logged(self, caplog):
        """LoggingSeatReservationGateway logs the seat count and account."""
        with caplog.at_level(logging.INFO, logger="purchases"):
            LoggingSeatReservationGateway().reserve_seat(4, 24)

        assert "Reserved 24 seats for account 4" in caplog.text

    def test_interfaces_cannot_be_instantiated(self):
        """Gateway interfaces are abstract."""
        with pytest.raises(TypeError):
            PaymentGateway()
        with pytest.raises(TypeError):
            SeatReservationGateway()


class TestBuildPurchaseService:
    """build_purchase_service resolves gateways from settings.PURCHASES."""

    def test_defaults_to_logging_gateways(self, settings):
        """Without PURCHASES the logging gateways are used."""
        del settings.PURCHASES

        service = build_purchase_service()

        assert isinstance(service, PurchaseService)
        assert isinstance(service._payment_gateway, LoggingPaymentGateway)
        assert isinstance(service._seat_reservation_gateway, LoggingSeatReservationGateway)

    def test_uses_configured_gateways(self, settings):
        """Dotted paths in PURCHASES select the gateway classes."""
        settings.PURCHASES = {
            "PAYMENT_GATEWAY": f"{__name__}.RecordingPaymentGateway",
            "SEAT_RESERVATION_GATEWAY": f"{__name__}.RecordingSeatReservationGateway",
        }

        service = build_purchase_service()

        assert isinstance(service._payment_gateway, RecordingPaymentGateway)
        assert isinstance(service._seat_reservation_gateway, RecordingSeatReservationGateway)

    def test_unknown_gateway_path_raises(self, settings):
        """A dotted path that does not resolve raises ImportError."""
        settings.PURCHASES = {"PAYMENT_GATEWAY": "purchases.gateways.DoesNotExist"}

        with pytest.raises(ImportError):
            build_purchase_service()
