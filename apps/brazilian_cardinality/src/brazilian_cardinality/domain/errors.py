"""Domain exceptions used across API, CLI and services."""

from __future__ import annotations

from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Any


def compose_error_message(*, cause: str, action: str) -> str:
    """Build a user-facing error message with cause and corrective action."""

    return f"Cause: {cause} Action: {action}"


@dataclass(slots=True)
class DomainError(Exception):
    """Base exception for predictable domain failures."""

    code: str
    message: str
    status_code: int
    details: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return self.message


class NumberTooBigError(DomainError):
    """Raised when a number magnitude reaches one quadrillion."""

    def __init__(self, number: int, message: str | None = None) -> None:
        super().__init__(
            code="NUMBER_TOO_BIG",
            message=message
            or compose_error_message(
                cause=f"{abs(number)} is too big to be spelled out.",
                action="Use a number whose absolute value is below 10^15.",
            ),
            status_code=HTTPStatus.UNPROCESSABLE_ENTITY,
            details={"number": str(number)},
        )

    @property
    def number(self) -> int:
        """Return the rejected value."""
        return int(self.details["number"])


class InvalidAmountError(DomainError):
    """Raised when a currency amount cannot be spelled out."""

    def __init__(self, amount: object, message: str | None = None) -> None:
        super().__init__(
            code="INVALID_AMOUNT",
            message=message
            or compose_error_message(
                cause=f"{amount!r} is not a valid amount in reais.",
                action="Provide a non-negative decimal amount such as 110.10.",
            ),
            status_code=HTTPStatus.BAD_REQUEST,
            details={"amount": str(amount)},
        )
