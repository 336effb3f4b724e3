"""Jina Reader API client.

One POST per call, no retries. Results are cached by request parameters in a
``ResultCache`` owned by the caller.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import httpx
import structlog
from pydantic import ValidationError

from jina_reader_mcp.cache import make_cache_key
from jina_reader_mcp.errors import (
    AuthConfigurationError,
    UpstreamHttpError,
    UpstreamNetworkError,
    UpstreamParseError,
)
from jina_reader_mcp.models.extraction import ExtractionResponse

if TYPE_CHECKING:
    from jina_reader_mcp.cache import ResultCache
    from jina_reader_mcp.config import UpstreamSettings

log = structlog.get_logger()

DEFAULT_BASE_URL = "https://r.jina.ai/"


def build_http_client(settings: UpstreamSettings | None = None) -> httpx.AsyncClient:
    """Create the shared httpx client used for all Reader API calls."""
    timeout = settings.timeout_seconds if settings is not None else 60.0
    return httpx.AsyncClient(timeout=httpx.Timeout(timeout))


def build_headers(api_key: str, engine: str = "none") -> dict[str, str]:
    headers = {
        "Accept": "application/json",
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
        "X-Return-Format": "markdown",
        "X-With-Links-Summary": "true",
        "X-Cache": "true",  # Reader API's own server-side cache
    }
    if engine != "none":
        headers["X-Engine"] = engine
    return headers


def build_body(
    params: dict[str, str],
    max_length: int | None = None,
    start_index: int | None = None,
) -> dict[str, Any]:
    """Request body: the payload field plus any pagination hints, forwarded as-is."""
    body: dict[str, Any] = dict(params)
    if max_length is not None:
        body["max_length"] = max_length
    if start_index is not None:
        body["start_index"] = start_index
    return body


class ReaderClient:
    """Calls the Reader API, consulting and populating the result cache."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        cache: ResultCache,
        api_key: str | None,
        base_url: str = DEFAULT_BASE_URL,
    ) -> None:
        self._client = http_client
        self._cache = cache
        self._api_key = api_key
        self._base_url = base_url

    async def fetch_extraction(
        self,
        params: dict[str, str],
        engine: str = "none",
        max_length: int | None = None,
        start_index: int | None = None,
        use_cache: bool = True,
    ) -> ExtractionResponse:
        """Extract content for one payload variant (``url``, ``html`` or ``pdf``).

        Raises:
            AuthConfigurationError: No API key configured. No request is made.
            UpstreamHttpError: The API answered with a non-2xx status.
            UpstreamNetworkError: The request failed at the transport level.
            UpstreamParseError: The body was not JSON or had an unexpected shape.
        """
        if not self._api_key:
            raise AuthConfigurationError()

        key = make_cache_key(params, engine, max_length, start_index)

        if use_cache:
            cached = self._cache.get(key)
            if cached is not None:
                log.info("cache_hit", engine=engine, start_index=start_index)
                return _parse_payload(cached)

        payload = await self._post(
            build_headers(self._api_key, engine),
            build_body(params, max_length, start_index),
        )
        result = _parse_payload(payload)

        if use_cache:
            self._cache.put(key, payload)

        return result

    async def _post(self, headers: dict[str, str], body: dict[str, Any]) -> Any:
        try:
            response = await self._client.post(self._base_url, headers=headers, json=body)
        except httpx.HTTPError as exc:
            log.warning("upstream_request_failed", url=self._base_url, exc_info=True)
            raise UpstreamNetworkError(f"Jina API request failed: {exc}") from exc

        if not response.is_success:
            log.warning("upstream_http_error", status_code=response.status_code)
            raise UpstreamHttpError(response.status_code)

        try:
            return response.json()
        except ValueError as exc:
            raise UpstreamParseError(f"Jina API returned invalid JSON: {exc}") from exc


def _parse_payload(payload: Any) -> ExtractionResponse:
    if not isinstance(payload, dict):
        raise UpstreamParseError("Jina API returned an unexpected response format")
    try:
        return ExtractionResponse.model_validate(payload)
    except ValidationError as exc:
        raise UpstreamParseError(
            f"Jina API returned an unexpected response format: {exc}"
        ) from exc
