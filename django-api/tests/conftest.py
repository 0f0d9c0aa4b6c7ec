"""Pytest configuration and shared fixtures."""

from unittest.mock import MagicMock

import pytest
from rest_framework.test import APIClient

from purchases.gateways import PaymentGateway, SeatReservationGateway
from purchases.services import PurchaseService


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def payment_gateway() -> MagicMock:
    return MagicMock(spec=PaymentGateway)


@pytest.fixture
def seat_reservation_gateway() -> MagicMock:
    return MagicMock(spec=SeatReservationGateway)


@pytest.fixture
def purchase_service(
    payment_gateway: MagicMock, seat_reservation_gateway: MagicMock
) -> PurchaseService:
    return PurchaseService(payment_gateway, seat_reservation_gateway)
