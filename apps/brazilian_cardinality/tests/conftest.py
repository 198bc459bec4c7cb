from __future__ import annotations

from collections.abc import Callable, Generator

import pytest
from fastapi.testclient import TestClient

from brazilian_cardinality.api.app import create_app
from brazilian_cardinality.core.settings import Settings, get_settings


@pytest.fixture
def settings_factory(
    monkeypatch: pytest.MonkeyPatch,
) -> Callable[..., Settings]:
    def build(*, bare_thousand: bool = False) -> Settings:
        monkeypatch.setenv("CARDINAL_BARE_THOUSAND", str(bare_thousand).lower())
        return Settings(_env_file=None)

    return build


@pytest.fixture
def client(
    settings_factory: Callable[..., Settings],
) -> Generator[TestClient, None, None]:
    app = create_app()
    settings = settings_factory()
    app.dependency_overrides[get_settings] = lambda: settings
    with TestClient(app) as test_client:
        yield test_client
