"""API schema exports."""

from brazilian_cardinality.api.schemas.cardinals import (
    CardinalResponse,
    CurrencyCardinalResponse,
)

__all__ = ["CardinalResponse", "CurrencyCardinalResponse"]
