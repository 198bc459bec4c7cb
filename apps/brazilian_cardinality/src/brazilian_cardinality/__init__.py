"""Brazilian Portuguese cardinal numbers and BRL amounts in words."""

from brazilian_cardinality.domain.cardinal import cardinal, number_cardinal
from brazilian_cardinality.domain.currency import currency_cardinal
from brazilian_cardinality.domain.errors import (
    DomainError,
    InvalidAmountError,
    NumberTooBigError,
)

__all__ = [
    "DomainError",
    "InvalidAmountError",
    "NumberTooBigError",
    "cardinal",
    "currency_cardinal",
    "number_cardinal",
]
