"""Shared fixtures: settings, sample Reader API payloads, a controllable clock."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Any

import pytest

from jina_reader_mcp.config import Settings

API_URL = "https://r.jina.ai/"


class FakeClock:
    """Callable clock for ResultCache; advance it instead of sleeping."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2025, 1, 1, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture(autouse=True)
def _no_ambient_api_key(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Keep a developer's JINA_API_KEY or .env from leaking into tests."""
    monkeypatch.delenv("JINA_API_KEY", raising=False)
    monkeypatch.delenv("JINA_READER__API_KEY", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def settings() -> Settings:
    return Settings(api_key="test-key")


@pytest.fixture()
def sample_payload() -> dict[str, Any]:
    return {
        "code": 200,
        "status": 20000,
        "data": {
            "title": "Example Domain",
            "description": "An example page",
            "url": "https://example.com/",
            "content": "This domain is for use in illustrative examples.",
            "links": {"More information": "https://www.iana.org/domains/example"},
            "usage": {"tokens": 42},
        },
    }
