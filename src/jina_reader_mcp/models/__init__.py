from __future__ import annotations

from jina_reader_mcp.models.cache import CacheEntry
from jina_reader_mcp.models.extraction import ExtractionResponse, ExtractionResult, Usage
from jina_reader_mcp.models.tools import (
    Engine,
    ReadHtmlInput,
    ReadInput,
    ReadOutcome,
    ReadPdfInput,
    ReadUrlInput,
)

__all__ = [
    # cache
    "CacheEntry",
    # extraction
    "ExtractionResponse",
    "ExtractionResult",
    "Usage",
    # tools
    "Engine",
    "ReadInput",
    "ReadUrlInput",
    "ReadHtmlInput",
    "ReadPdfInput",
    "ReadOutcome",
]
