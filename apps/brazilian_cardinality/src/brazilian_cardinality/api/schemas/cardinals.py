"""Schemas for cardinal spelling endpoints."""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel

from brazilian_cardinality.domain.money import format_money


class CardinalResponse(BaseModel):
    """Spelled-out form of an integer."""

    number: int
    cardinal: str


class CurrencyCardinalResponse(BaseModel):
    """Spelled-out form of a BRL amount."""

    amount: str
    cardinal: str

    @classmethod
    def from_amount(cls, amount: Decimal, cardinal: str) -> CurrencyCardinalResponse:
        return cls(amount=format_money(amount), cardinal=cardinal)
