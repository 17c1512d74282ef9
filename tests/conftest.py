# tests/conftest.py

from __future__ import annotations

import pytest

from clickup_timer.config import RuntimeSettings

from .fakes import FakeClickUpAPI

API_ROOT = "https://api.clickup.com/api/v2"


@pytest.fixture()
def settings() -> RuntimeSettings:
    return RuntimeSettings(api_key="pk_test_123", base_url=API_ROOT)


@pytest.fixture()
def api() -> FakeClickUpAPI:
    """
    Fake API with the identity and team lookups most operations need.

    Tests add or override routes for the endpoint under test.
    """
    fake = FakeClickUpAPI()
    fake.add(
        "GET",
        "/user",
        json_body={"user": {"id": 42, "username": "ada", "email": "ada@example.com", "color": "#fff"}},
    )
    fake.add(
        "GET",
        "/team",
        json_body={
            "teams": [
                {"id": "900", "name": "Main", "color": "#000", "avatar": None, "members": []},
                {"id": "901", "name": "Side", "color": "#111", "avatar": None, "members": []},
            ]
        },
    )
    return fake


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's real ClickUp settings out of the tests."""
    for name in (
        "CLICKUP_API_KEY",
        "CLICKUP_API_BASE",
        "CLICKUP_MEETINGS_TASK",
        "CLICKUP_TIMEOUT",
        "CLICKUP_LOG_LEVEL",
        "CLICKUP_LOG_FILE",
        "CLICKUP_LOG_FILE_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("clickup_timer.config.load_dotenv", lambda *a, **k: False)
