"""Integer to pt-BR cardinal words.

Numbers are spelled triad by triad. Inside a triad the connector "e" is
always written ("cento e vinte e um"). Between triads it is written only
when the material on its right reduces to a single significant unit at
that scale ("dois mil e quinhentos", "um milhão e dez mil") and is dropped
when that material already carries its own "e" ("dois mil quinhentos e
um") or when a lower join will supply it.
"""

from __future__ import annotations

import enum
from collections.abc import Mapping

from brazilian_cardinality.domain.errors import NumberTooBigError
from brazilian_cardinality.domain.lexicon import (
    BILLION,
    CONNECTOR,
    HUNDRED_EXACT,
    HUNDREDS,
    MILLION,
    NEGATIVE_PREFIX,
    ONES,
    TENS,
    THOUSAND,
    TRILLION,
    ScaleDescriptor,
)


class MagnitudeBand(enum.StrEnum):
    """Closed set of magnitude classes an absolute value can belong to."""

    LOW = "low"
    THOUSANDS = "thousands"
    MILLIONS = "millions"
    BILLIONS = "billions"
    TRILLIONS = "trillions"
    OVERFLOW = "overflow"


_SCALE_BY_BAND: dict[MagnitudeBand, ScaleDescriptor] = {
    MagnitudeBand.THOUSANDS: THOUSAND,
    MagnitudeBand.MILLIONS: MILLION,
    MagnitudeBand.BILLIONS: BILLION,
    MagnitudeBand.TRILLIONS: TRILLION,
}


def classify_magnitude(number: int) -> MagnitudeBand:
    """Return the magnitude band of the absolute value of number."""

    magnitude = abs(number)
    if magnitude < THOUSAND.scale:
        return MagnitudeBand.LOW
    for band, descriptor in _SCALE_BY_BAND.items():
        if descriptor.contains(magnitude):
            return band
    return MagnitudeBand.OVERFLOW


def number_cardinal(number: int, *, bare_thousand: bool = False) -> str:
    """Spell out number as a Brazilian Portuguese cardinal.

    Negative values are prefixed with "menos". With ``bare_thousand`` the
    numbers 1000 to 1999 start with "mil" instead of "um mil".

    Raises:
        NumberTooBigError: when ``abs(number) >= 10**15``.
    """

    negative = NEGATIVE_PREFIX if number < 0 else ""
    magnitude = abs(int(number))

    band = classify_magnitude(magnitude)
    if band is MagnitudeBand.OVERFLOW:
        raise NumberTooBigError(number)
    if band is MagnitudeBand.LOW:
        expression = spell_low(magnitude)
    else:
        expression = spell_grouped(
            magnitude, _SCALE_BY_BAND[band], bare_thousand=bare_thousand
        )

    return f"{negative}{expression}"


cardinal = number_cardinal


def spell_low(number: int) -> str:
    """Spell out a value in the 0..999 range."""

    if number < 10:
        return ONES[number]
    if number < 20:
        return TENS[number]
    if number < 100:
        return _join_within_triad(number, 10, TENS)
    if number == 100:
        return HUNDRED_EXACT
    return _join_within_triad(number, 100, HUNDREDS)


def _join_within_triad(number: int, step: int, words: Mapping[int, str]) -> str:
    remainder = number % step
    head = words[number - remainder]
    if remainder == 0:
        return head
    return f"{head} {CONNECTOR} {spell_low(remainder)}"


def spell_grouped(
    number: int,
    descriptor: ScaleDescriptor,
    *,
    bare_thousand: bool = False,
) -> str:
    """Spell out a value of at least one thousand at the given scale."""

    quotient, remainder = divmod(number, descriptor.scale)
    word = descriptor.word_for(quotient)
    if descriptor is THOUSAND and quotient == 1 and bare_thousand:
        high_order = word
    else:
        quotient_words = number_cardinal(quotient, bare_thousand=bare_thousand)
        high_order = f"{quotient_words} {word}"

    if remainder == 0:
        return high_order

    low_order = number_cardinal(remainder, bare_thousand=bare_thousand)
    if needs_connector_on_left(remainder, descriptor.scale // 1000):
        return f"{high_order} {CONNECTOR} {low_order}"
    return f"{high_order} {low_order}"


def needs_connector_on_left(remainder: int, inner_scale: int) -> bool:
    """Return whether "e" goes right before the spelled remainder.

    ``inner_scale`` is the scale one triad below the group being joined
    (1 when the remainder is inside the units triad).
    """

    if inner_scale == 1:
        if remainder // 100 > 0:
            # 2500 takes "e", 2540 does not
            return remainder % 100 == 0
        return True

    if remainder % inner_scale == 0:
        return count_nonzero_digits(remainder // inner_scale) == 1

    return False


def count_nonzero_digits(triad: int) -> int:
    """Count the nonzero decimal digits of a 0..999 group."""

    digits = (triad // 100, triad // 10 % 10, triad % 10)
    return sum(1 for digit in digits if digit != 0)
