"""Spell BRL amounts in words, e.g. for receipts and promissory notes."""

from __future__ import annotations

from decimal import Decimal

from brazilian_cardinality.domain.cardinal import number_cardinal
from brazilian_cardinality.domain.errors import InvalidAmountError
from brazilian_cardinality.domain.lexicon import CONNECTOR, MILLION
from brazilian_cardinality.domain.money import AmountInput, split_money, to_money

FREE_OF_CHARGE = "grátis"


def currency_cardinal(amount: AmountInput, *, bare_thousand: bool = False) -> str:
    """Spell out an amount in reais and centavos.

    The amount is rounded to centavos (HALF_UP) before spelling. Zero is
    "grátis".

    Raises:
        InvalidAmountError: for negative or non-numeric amounts.
        NumberTooBigError: when the reais part reaches 10^15.
    """

    value = to_money(amount)
    if value < Decimal("0"):
        raise InvalidAmountError(amount)

    reais, centavos = split_money(value)
    if reais == 0 and centavos == 0:
        return FREE_OF_CHARGE

    parts: list[str] = []
    if reais:
        parts.append(_reais_phrase(reais, bare_thousand=bare_thousand))
    if centavos:
        parts.append(_centavos_phrase(centavos, standalone=reais == 0))
    return f" {CONNECTOR} ".join(parts)


def _reais_phrase(reais: int, *, bare_thousand: bool) -> str:
    words = number_cardinal(reais, bare_thousand=bare_thousand)
    unit = "real" if reais == 1 else "reais"
    # "um milhão de reais" but "dois milhões duzentos reais"
    if reais % MILLION.scale == 0:
        return f"{words} de {unit}"
    return f"{words} {unit}"


def _centavos_phrase(centavos: int, *, standalone: bool) -> str:
    words = number_cardinal(centavos)
    unit = "centavo" if centavos == 1 else "centavos"
    if standalone:
        return f"{words} {unit} de real"
    return f"{words} {unit}"
