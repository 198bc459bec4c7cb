"""API dependency providers."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from brazilian_cardinality.core.settings import Settings, get_settings
from brazilian_cardinality.services.spelling_service import SpellingService


def get_spelling_service(
    settings: Annotated[Settings, Depends(get_settings)],
) -> SpellingService:
    """Build spelling service from runtime settings."""

    return SpellingService.from_settings(settings)
