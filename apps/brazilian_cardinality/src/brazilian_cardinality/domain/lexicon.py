"""Portuguese (pt-BR) word tables for cardinal numbers."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

ONES = MappingProxyType(
    {
        0: "zero",
        1: "um",
        2: "dois",
        3: "três",
        4: "quatro",
        5: "cinco",
        6: "seis",
        7: "sete",
        8: "oito",
        9: "nove",
    }
)

TENS = MappingProxyType(
    {
        10: "dez",
        11: "onze",
        12: "doze",
        13: "treze",
        14: "quatorze",
        15: "quinze",
        16: "dezesseis",
        17: "dezessete",
        18: "dezoito",
        19: "dezenove",
        20: "vinte",
        30: "trinta",
        40: "quarenta",
        50: "cinquenta",
        60: "sessenta",
        70: "setenta",
        80: "oitenta",
        90: "noventa",
    }
)

# 100 alone is "cem"; "cento" only appears followed by "e".
HUNDRED_EXACT = "cem"

HUNDREDS = MappingProxyType(
    {
        100: "cento",
        200: "duzentos",
        300: "trezentos",
        400: "quatrocentos",
        500: "quinhentos",
        600: "seiscentos",
        700: "setecentos",
        800: "oitocentos",
        900: "novecentos",
    }
)

NEGATIVE_PREFIX = "menos "
CONNECTOR = "e"


@dataclass(frozen=True, slots=True)
class ScaleDescriptor:
    """Power-of-a-thousand group with its singular and plural names."""

    scale: int
    singular: str
    plural: str

    def contains(self, number: int) -> bool:
        """Return whether number falls in the half-open band of this scale."""
        return self.scale <= number < self.scale * 1000

    def word_for(self, quotient: int) -> str:
        """Return the scale word agreeing with the group quotient."""
        return self.plural if quotient > 1 else self.singular


THOUSAND = ScaleDescriptor(scale=1_000, singular="mil", plural="mil")
MILLION = ScaleDescriptor(scale=1_000_000, singular="milhão", plural="milhões")
BILLION = ScaleDescriptor(scale=1_000_000_000, singular="bilhão", plural="bilhões")
TRILLION = ScaleDescriptor(
    scale=1_000_000_000_000, singular="trilhão", plural="trilhões"
)

SCALES: tuple[ScaleDescriptor, ...] = (THOUSAND, MILLION, BILLION, TRILLION)

MAX_CARDINAL = TRILLION.scale * 1000 - 1
