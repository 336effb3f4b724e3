"""In-memory result cache with a fixed time-to-live.

Entries live for the lifetime of the process only. Expiry is lazy: an entry
older than the TTL is dropped when its key is next looked up. There is no
background sweep and no size bound.

No locking: concurrent tool calls for the same key may both miss and both
store. The second write replaces the first with an equivalent payload.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import Any

import structlog

from jina_reader_mcp.models.cache import CacheEntry

log = structlog.get_logger()

DEFAULT_TTL = timedelta(hours=3)


def _utcnow() -> datetime:
    return datetime.now(UTC)


def make_cache_key(
    params: dict[str, str],
    engine: str,
    max_length: int | None,
    start_index: int | None,
) -> str:
    """Serialise request parameters into a cache key.

    Pagination arguments are part of the key, so each (document, window,
    engine) combination is cached separately.
    """
    return json.dumps(
        {
            "params": params,
            "engine": engine,
            "max_length": max_length,
            "start_index": start_index,
        },
        separators=(",", ":"),
    )


class ResultCache:
    """Process-local mapping of request key to Reader API payload."""

    def __init__(
        self,
        ttl: timedelta = DEFAULT_TTL,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._ttl = ttl
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def get(self, key: str) -> Any | None:
        """Return the cached payload, or ``None`` on miss or expiry."""
        entry = self._entries.get(key)
        if entry is None:
            return None

        if self._clock() - entry.stored_at >= self._ttl:
            del self._entries[key]
            log.debug("cache_expired", stored_at=entry.stored_at.isoformat())
            return None

        return entry.payload

    def put(self, key: str, payload: Any) -> None:
        self._entries[key] = CacheEntry(key=key, payload=payload, stored_at=self._clock())
