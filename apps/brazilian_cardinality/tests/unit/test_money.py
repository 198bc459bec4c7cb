from decimal import Decimal

import pytest

from brazilian_cardinality.domain.errors import InvalidAmountError, NumberTooBigError
from brazilian_cardinality.domain.money import (
    format_money,
    parse_money,
    quantize_money,
    split_money,
    to_money,
)


def test_quantize_money_uses_round_half_up() -> None:
    assert quantize_money(Decimal("10.005")) == Decimal("10.01")
    assert quantize_money(Decimal("10.004")) == Decimal("10.00")


def test_parse_money_returns_quantized_decimal() -> None:
    assert parse_money("2.675") == Decimal("2.68")


def test_format_money_has_two_decimal_places() -> None:
    assert format_money(Decimal("5")) == "5.00"


def test_to_money_keeps_float_literal_value() -> None:
    assert to_money(110.10) == Decimal("110.10")
    assert to_money(1.4) == Decimal("1.40")
    assert to_money(10) == Decimal("10.00")
    assert to_money(" 3.5 ") == Decimal("3.50")


@pytest.mark.parametrize("value", ["abc", "", Decimal("NaN"), float("inf"), True])
def test_to_money_rejects_invalid_values(value: object) -> None:
    with pytest.raises(InvalidAmountError):
        to_money(value)  # type: ignore[arg-type]


def test_split_money_returns_reais_and_centavos() -> None:
    assert split_money(Decimal("110001.21")) == (110001, 21)
    assert split_money(Decimal("0.05")) == (0, 5)
    assert split_money(Decimal("10")) == (10, 0)


@pytest.mark.parametrize("value", ["1" + "0" * 26, "9" * 27, "1e30", 10**15])
def test_to_money_rejects_amounts_beyond_spelling_range(value: object) -> None:
    with pytest.raises(NumberTooBigError):
        to_money(value)  # type: ignore[arg-type]


def test_to_money_keeps_largest_spellable_reais() -> None:
    assert to_money("999999999999999.99") == Decimal("999999999999999.99")


def test_to_money_maps_unquantizable_negative_to_invalid_amount() -> None:
    with pytest.raises(InvalidAmountError):
        to_money("-1e30")
