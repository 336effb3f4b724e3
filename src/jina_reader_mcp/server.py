"""MCP server entry point.

Run with ``jina-reader-mcp`` or ``python -m jina_reader_mcp.server``.
"""

import sys
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import timedelta
from typing import Annotated

import structlog
from mcp.server.fastmcp import Context, FastMCP
from pydantic import Field, ValidationError

from jina_reader_mcp.cache import ResultCache
from jina_reader_mcp.client import ReaderClient, build_http_client
from jina_reader_mcp.config import LoggingSettings, Settings
from jina_reader_mcp.logging_config import setup_logging
from jina_reader_mcp.models.tools import (
    ENGINE_DESCRIPTION,
    ENGINES,
    ReadHtmlInput,
    ReadPdfInput,
    ReadUrlInput,
)
from jina_reader_mcp.state import AppState
from jina_reader_mcp.tools import read_content

log = structlog.get_logger()

SERVER_NAME = "Jina Reader MCP"

# Arguments are loosely typed here and validated by the ReadInput models, so that
# bad values come back as "Error: ..." text instead of a protocol-level fault.
EngineArg = Annotated[
    str,
    Field(description=ENGINE_DESCRIPTION, json_schema_extra={"enum": list(ENGINES)}),
]
MaxLengthArg = Annotated[
    float | None,
    Field(description="Maximum number of characters to return (default is 20000)"),
]
StartIndexArg = Annotated[
    float | None,
    Field(description="Start content from the character index (default is 0)"),
]


def build_state(settings: Settings) -> AppState:
    """Wire the HTTP client, cache and Reader client for one server process."""
    http_client = build_http_client(settings.upstream)
    cache = ResultCache(ttl=timedelta(hours=settings.cache.ttl_hours))
    api_key = settings.api_key.get_secret_value() if settings.api_key is not None else None
    client = ReaderClient(
        http_client,
        cache,
        api_key,
        base_url=settings.upstream.base_url,
    )
    return AppState(settings=settings, http_client=http_client, cache=cache, client=client)


def create_server(settings: Settings) -> FastMCP:
    @asynccontextmanager
    async def lifespan(_server: FastMCP) -> AsyncIterator[AppState]:
        state = build_state(settings)
        log.info(
            "server_started",
            transport=settings.server.transport,
            cache_enabled=settings.cache.enabled,
            api_key_configured=settings.api_key is not None,
        )
        try:
            yield state
        finally:
            await state.http_client.aclose()
            log.info("server_stopped")

    mcp = FastMCP(
        SERVER_NAME,
        lifespan=lifespan,
        host=settings.server.host,
        port=settings.server.port,
    )

    @mcp.tool(description="Read and extract content from a webpage using Jina Reader")
    async def jina_read_url(
        url: Annotated[str, Field(description="URL of the webpage to read")],
        ctx: Context,
        engine: EngineArg = "none",
        max_length: MaxLengthArg = None,
        start_index: StartIndexArg = None,
    ) -> str:
        arguments = {
            "url": url,
            "engine": engine,
            "max_length": max_length,
            "start_index": start_index,
        }
        state: AppState = ctx.request_context.lifespan_context
        outcome = await read_content.handle(ReadUrlInput, arguments, state)
        return outcome.render()

    @mcp.tool(description="Read and extract content from HTML using Jina Reader")
    async def jina_read_html(
        html: Annotated[str, Field(description="HTML content to read")],
        ctx: Context,
        engine: EngineArg = "none",
        max_length: MaxLengthArg = None,
        start_index: StartIndexArg = None,
    ) -> str:
        arguments = {
            "html": html,
            "engine": engine,
            "max_length": max_length,
            "start_index": start_index,
        }
        state: AppState = ctx.request_context.lifespan_context
        outcome = await read_content.handle(ReadHtmlInput, arguments, state)
        return outcome.render()

    @mcp.tool(description="Read and extract content from a PDF file using Jina Reader")
    async def jina_read_pdf(
        pdf: Annotated[str, Field(description="Base64 encoded PDF content")],
        ctx: Context,
        engine: EngineArg = "none",
        max_length: MaxLengthArg = None,
        start_index: StartIndexArg = None,
    ) -> str:
        arguments = {
            "pdf": pdf,
            "engine": engine,
            "max_length": max_length,
            "start_index": start_index,
        }
        state: AppState = ctx.request_context.lifespan_context
        outcome = await read_content.handle(ReadPdfInput, arguments, state)
        return outcome.render()

    return mcp


def main() -> None:
    try:
        settings = Settings()
    except ValidationError:
        # Settings are unusable, so log with defaults before bailing out.
        setup_logging(LoggingSettings())
        log.error("config_invalid", exc_info=True)
        sys.exit(1)

    setup_logging(settings.logging)
    log.info("server_starting", name=SERVER_NAME, transport=settings.server.transport)

    mcp = create_server(settings)
    transport = "stdio" if settings.server.transport == "stdio" else "streamable-http"
    try:
        mcp.run(transport=transport)
    except Exception:
        log.critical("server_fatal_error", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
