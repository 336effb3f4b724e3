"""Shared application state built once at startup and handed to every tool call."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx

    from jina_reader_mcp.cache import ResultCache
    from jina_reader_mcp.client import ReaderClient
    from jina_reader_mcp.config import Settings


@dataclass
class AppState:
    settings: Settings
    http_client: httpx.AsyncClient
    cache: ResultCache
    client: ReaderClient
