"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from enum import Enum
from typing import Self


class TicketCategory(Enum):
    """Closed set of ticket categories."""

    ADULT = "ADULT"
    CHILD = "CHILD"
    INFANT = "INFANT"


@dataclass(frozen=True)
class AccountId:
    """Identifier of the purchasing account. Always strictly positive."""

    value: int

    def __post_init__(self) -> None:
        # bool is an int subclass; True must not pass as account 1
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError("Account id must be an integer")
        if self.value <= 0:
            raise ValueError("Account id must be greater than zero")

    @classmethod
    def from_raw(cls, value: int | None) -> Self:
        if value is None:
            raise ValueError("Account id is required")
        return cls(value=value)


@dataclass(frozen=True)
class Money:
    """Exact integer amount. No fractional currency."""

    amount: int

    def __post_init__(self) -> None:
        if isinstance(self.amount, bool) or not isinstance(self.amount, int):
            raise ValueError("Money amount must be an integer")
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    def __add__(self, other: Self) -> Self:
        return type(self)(self.amount + other.amount)

    def times(self, quantity: int) -> Self:
        return type(self)(self.amount * quantity)

    def __str__(self) -> str:
        return str(self.amount)


@dataclass(frozen=True)
class SeatCount:
    """Non-negative number of seats."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError("Seat count must be an integer")
        if self.value < 0:
            raise ValueError("Seat count cannot be negative")
