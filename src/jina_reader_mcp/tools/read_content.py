"""Handler shared by the jina_read_url, jina_read_html and jina_read_pdf tools.

The handler never raises. Validation failures and upstream errors come back
as a ``ReadOutcome`` with ``error`` set, which the server renders as
``Error: <message>`` text inside a normal tool result.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog
from pydantic import ValidationError

from jina_reader_mcp.errors import ErrorCode, ReaderError
from jina_reader_mcp.formatter import format_extraction
from jina_reader_mcp.models.tools import ReadOutcome

if TYPE_CHECKING:
    from jina_reader_mcp.models.tools import ReadInput
    from jina_reader_mcp.state import AppState

log = structlog.get_logger()


def _validation_message(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"])
        msg = err["msg"].removeprefix("Value error, ")
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts)


async def handle(
    input_model: type[ReadInput],
    arguments: dict[str, Any],
    state: AppState,
) -> ReadOutcome:
    """Validate ``arguments``, fetch the extraction and format the requested page."""
    try:
        request = input_model.model_validate(arguments)
    except ValidationError as exc:
        message = _validation_message(exc)
        log.info("tool_invalid_input", code=ErrorCode.INVALID_INPUT, message=message)
        return ReadOutcome(error=message)

    settings = state.settings
    try:
        response = await state.client.fetch_extraction(
            request.payload(),
            request.engine,
            request.max_length,
            request.start_index,
            use_cache=settings.cache.enabled,
        )
    except ReaderError as exc:
        log.warning(
            "tool_error", code=exc.code, message=exc.message, recoverable=exc.recoverable
        )
        return ReadOutcome(error=exc.message)
    except Exception as exc:
        log.error("tool_unexpected_error", exc_info=True)
        return ReadOutcome(error=str(exc) or type(exc).__name__)

    text = format_extraction(
        response,
        request.max_length,
        request.start_index or 0,
        default_max_length=settings.pagination.default_max_length,
        legacy_pagination=settings.pagination.legacy_slice,
    )
    return ReadOutcome(text=text)
