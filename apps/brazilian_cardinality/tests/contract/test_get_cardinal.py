from __future__ import annotations

from collections.abc import Callable

from fastapi.testclient import TestClient

from brazilian_cardinality.api.app import create_app
from brazilian_cardinality.core.settings import Settings, get_settings


def test_get_cardinal_returns_words(client: TestClient) -> None:
    response = client.get("/v1/cardinals/29501")

    assert response.status_code == 200
    assert response.json() == {
        "number": 29501,
        "cardinal": "vinte e nove mil quinhentos e um",
    }


def test_get_cardinal_handles_negative_numbers(client: TestClient) -> None:
    response = client.get("/v1/cardinals/-21")

    assert response.status_code == 200
    assert response.json()["cardinal"] == "menos vinte e um"


def test_get_cardinal_rejects_too_big_number(client: TestClient) -> None:
    response = client.get("/v1/cardinals/1000000000000000")

    body = response.json()
    assert response.status_code == 422
    assert body["code"] == "NUMBER_TOO_BIG"
    assert body["details"] == {"number": "1000000000000000"}


def test_get_cardinal_rejects_non_integer(client: TestClient) -> None:
    response = client.get("/v1/cardinals/dez")

    assert response.status_code == 400
    assert response.json()["code"] == "INVALID_REQUEST"


def test_get_cardinal_honors_bare_thousand_setting(
    settings_factory: Callable[..., Settings],
) -> None:
    app = create_app()
    settings = settings_factory(bare_thousand=True)
    app.dependency_overrides[get_settings] = lambda: settings

    with TestClient(app) as client:
        response = client.get("/v1/cardinals/1000")

    assert response.json()["cardinal"] == "mil"
