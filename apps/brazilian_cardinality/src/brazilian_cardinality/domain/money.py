"""Money helpers using Decimal with BRL precision rules."""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from brazilian_cardinality.domain.errors import InvalidAmountError, NumberTooBigError
from brazilian_cardinality.domain.lexicon import MAX_CARDINAL

MONEY_PRECISION = Decimal("0.01")

AmountInput = Decimal | int | float | str


def quantize_money(value: Decimal) -> Decimal:
    """Return value rounded to two decimal places with HALF_UP strategy."""

    return value.quantize(MONEY_PRECISION, rounding=ROUND_HALF_UP)


def parse_money(value: str) -> Decimal:
    """Parse and normalize input money string into Decimal."""

    return quantize_money(Decimal(value))


def format_money(value: Decimal) -> str:
    """Render money as string with exactly two decimal places."""

    return f"{quantize_money(value):.2f}"


def to_money(value: AmountInput) -> Decimal:
    """Convert a user supplied amount into a quantized Decimal.

    Raises:
        InvalidAmountError: for non-numeric or non-finite values.
        NumberTooBigError: when the reais part reaches 10^15.
    """

    if isinstance(value, bool):
        raise InvalidAmountError(value)
    try:
        if isinstance(value, Decimal):
            amount = value
        elif isinstance(value, str):
            amount = Decimal(value.strip())
        else:
            # str() keeps 110.10 from becoming 110.099999...
            amount = Decimal(str(value))
    except InvalidOperation as exc:
        raise InvalidAmountError(value) from exc

    if not amount.is_finite():
        raise InvalidAmountError(value)
    # amounts from 10^26 up exceed the context precision once quantized
    if amount >= MAX_CARDINAL + 1:
        raise NumberTooBigError(int(amount))
    try:
        return quantize_money(amount)
    except InvalidOperation as exc:
        raise InvalidAmountError(value) from exc


def split_money(value: Decimal) -> tuple[int, int]:
    """Return whole reais and centavos of a non-negative quantized amount."""

    cents = int(quantize_money(value) * 100)
    return divmod(cents, 100)
