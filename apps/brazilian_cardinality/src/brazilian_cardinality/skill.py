"""OpenClaw skill bootstrap for brazilian-cardinality."""

from __future__ import annotations

import re

from brazilian_cardinality.domain.errors import DomainError
from brazilian_cardinality.services.spelling_service import SpellingService

USAGE = (
    "Unsupported command. Use: extenso <numero inteiro> or "
    "reais <valor> to spell out a value."
)


THOUSANDS_GROUPED = re.compile(r"^-?\d{1,3}(\.\d{3})+$")
PLAIN_INTEGER = re.compile(r"^-?\d+$")


def _parse_integer(raw_value: str) -> int | None:
    # "." is only accepted as a thousands separator: 2.500 but not 1.5
    if THOUSANDS_GROUPED.match(raw_value):
        return int(raw_value.replace(".", ""))
    if PLAIN_INTEGER.match(raw_value):
        return int(raw_value)
    return None


def _normalize_amount(raw_value: str) -> str:
    cleaned = raw_value.removeprefix("R$").strip()
    if "," in cleaned:
        # 1.234,56 -> 1234.56
        cleaned = cleaned.replace(".", "").replace(",", ".")
    return cleaned


def handle_command(
    command_text: str,
    service: SpellingService | None = None,
) -> str:
    """Handle skill commands and return the spelled-out value."""
    normalized_command = command_text.strip()
    if not normalized_command:
        return "Provide a command to spell out a value."

    keyword, _, raw_value = normalized_command.partition(" ")
    raw_value = raw_value.strip()
    resolved_service = service or SpellingService.from_settings()

    try:
        if keyword == "extenso":
            number = _parse_integer(raw_value)
            if number is None:
                return "Invalid number. Use: extenso <numero inteiro>."
            return resolved_service.spell_number(number)
        if keyword == "reais":
            if not raw_value:
                return "Missing amount. Use: reais <valor>."
            return resolved_service.spell_currency(_normalize_amount(raw_value))
    except DomainError as exc:
        return exc.message

    return USAGE
