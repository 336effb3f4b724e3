"""Unit-specific fixtures (no network; HTTP is mocked with respx)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
import pytest

from jina_reader_mcp.cache import ResultCache
from jina_reader_mcp.client import ReaderClient

if TYPE_CHECKING:
    from tests.conftest import FakeClock


@pytest.fixture()
def cache(clock: FakeClock) -> ResultCache:
    """Empty cache driven by the fake clock."""
    return ResultCache(clock=clock)


@pytest.fixture()
async def http_client():
    async with httpx.AsyncClient() as client:
        yield client


@pytest.fixture()
def reader(http_client: httpx.AsyncClient, cache: ResultCache) -> ReaderClient:
    return ReaderClient(http_client, cache, api_key="test-key")
