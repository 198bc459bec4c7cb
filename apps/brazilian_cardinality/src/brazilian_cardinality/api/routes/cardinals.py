"""Cardinal spelling routes."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from brazilian_cardinality.api.dependencies import get_spelling_service
from brazilian_cardinality.api.schemas.cardinals import (
    CardinalResponse,
    CurrencyCardinalResponse,
)
from brazilian_cardinality.domain.money import to_money
from brazilian_cardinality.services.spelling_service import SpellingService

router = APIRouter(tags=["Cardinals"])

AMOUNT_PATTERN = r"^[0-9]+(\.[0-9]+)?$"


@router.get("/cardinals/{number}", response_model=CardinalResponse)
def get_cardinal(
    number: int,
    service: Annotated[SpellingService, Depends(get_spelling_service)],
) -> CardinalResponse:
    """Spell out an integer in Brazilian Portuguese."""

    return CardinalResponse(number=number, cardinal=service.spell_number(number))


@router.get("/currency", response_model=CurrencyCardinalResponse)
def get_currency_cardinal(
    amount: Annotated[str, Query(pattern=AMOUNT_PATTERN, max_length=32)],
    service: Annotated[SpellingService, Depends(get_spelling_service)],
) -> CurrencyCardinalResponse:
    """Spell out a BRL amount in reais and centavos."""

    value = to_money(amount)
    return CurrencyCardinalResponse.from_amount(value, service.spell_currency(value))
