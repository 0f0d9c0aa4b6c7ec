"""Collaborator interfaces (gateway pattern).

Gateways must be swappable. The purchase service only sees these
interfaces; whatever they raise is propagated to the caller unchanged.
"""

from abc import ABC, abstractmethod


class PaymentGateway(ABC):
    """Interface for taking payment from an account."""

    @abstractmethod
    def make_payment(self, account_id: int, amount: int) -> None:
        """Charge ``amount`` to the account. Raise on failure."""
        ...


class SeatReservationGateway(ABC):
    """Interface for reserving seats for an account."""

    @abstractmethod
    def reserve_seat(self, account_id: int, seat_count: int) -> None:
        """Reserve ``seat_count`` seats for the account. Raise on failure."""
        ...
