"""Domain error codes for the purchases module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_ACCOUNT_ID = "INVALID_ACCOUNT_ID"
    EMPTY_PURCHASE = "EMPTY_PURCHASE"
    INVALID_TICKET_QUANTITY = "INVALID_TICKET_QUANTITY"
    NEGATIVE_TICKET_QUANTITY = "NEGATIVE_TICKET_QUANTITY"
    TICKET_LIMIT_EXCEEDED = "TICKET_LIMIT_EXCEEDED"
    ADULT_TICKET_REQUIRED = "ADULT_TICKET_REQUIRED"
    UNKNOWN_TICKET_CATEGORY = "UNKNOWN_TICKET_CATEGORY"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidPurchaseError(DomainError):
    """Raised when a purchase request fails validation.

    Always raised before any collaborator is invoked.
    """


class InvalidAccountIdError(InvalidPurchaseError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_ACCOUNT_ID,
            message="Account id must be a positive integer",
        )


class EmptyPurchaseError(InvalidPurchaseError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.EMPTY_PURCHASE,
            message="At least one ticket request is required",
        )


class InvalidTicketQuantityError(InvalidPurchaseError):
    """Raised for the first line item whose quantity is not an integer."""

    def __init__(self, quantity: object) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TICKET_QUANTITY,
            message="Number of tickets must be a whole number",
        )
        self.quantity = quantity


class NegativeTicketQuantityError(InvalidPurchaseError):
    """Raised for the first line item with a negative quantity."""

    def __init__(self, quantity: int) -> None:
        super().__init__(
            code=ErrorCode.NEGATIVE_TICKET_QUANTITY,
            message="Number of tickets cannot be negative",
        )
        self.quantity = quantity


class TicketLimitExceededError(InvalidPurchaseError):
    def __init__(self, limit: int) -> None:
        super().__init__(
            code=ErrorCode.TICKET_LIMIT_EXCEEDED,
            message=f"No more than {limit} tickets can be purchased at once",
        )
        self.limit = limit


class AdultTicketRequiredError(InvalidPurchaseError):
    """Child and infant tickets cannot be bought without an adult."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.ADULT_TICKET_REQUIRED,
            message="At least one adult ticket is required",
        )


class UnknownTicketCategoryError(InvalidPurchaseError):
    def __init__(self, category: object) -> None:
        super().__init__(
            code=ErrorCode.UNKNOWN_TICKET_CATEGORY,
            message="Unknown ticket category",
        )
        self.category = category
