"""Business service spelling numbers and amounts for the outer surfaces."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from brazilian_cardinality.core.settings import Settings, get_settings
from brazilian_cardinality.domain.cardinal import number_cardinal
from brazilian_cardinality.domain.currency import currency_cardinal
from brazilian_cardinality.domain.errors import DomainError
from brazilian_cardinality.domain.money import AmountInput

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class SpellingService:
    """Applies runtime settings to cardinal and currency spelling."""

    bare_thousand: bool = False

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> SpellingService:
        resolved = settings or get_settings()
        return cls(bare_thousand=resolved.bare_thousand)

    def spell_number(self, number: int) -> str:
        try:
            words = number_cardinal(number, bare_thousand=self.bare_thousand)
        except DomainError as exc:
            _log_rejection(exc, value=number)
            raise
        logger.info(
            "cardinal_spelled",
            extra={"number": str(number), "word_count": len(words.split())},
        )
        return words

    def spell_currency(self, amount: AmountInput) -> str:
        try:
            words = currency_cardinal(amount, bare_thousand=self.bare_thousand)
        except DomainError as exc:
            _log_rejection(exc, value=amount)
            raise
        logger.info(
            "currency_spelled",
            extra={"amount": str(amount), "word_count": len(words.split())},
        )
        return words


def _log_rejection(exc: DomainError, *, value: object) -> None:
    logger.warning(
        "spelling_rejected",
        extra={"code": exc.code, "value": str(value)},
    )
