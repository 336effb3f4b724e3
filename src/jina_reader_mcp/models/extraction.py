from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Usage(BaseModel):
    model_config = ConfigDict(extra="ignore")

    tokens: int | None = None


class ExtractionResult(BaseModel):
    """The ``data`` object of a Reader API response."""

    model_config = ConfigDict(extra="ignore")

    title: str | None = None
    description: str | None = None
    content: str | None = None
    links: dict[str, str] = {}  # link text -> URL
    warning: str | None = None
    usage: Usage | None = None


class ExtractionResponse(BaseModel):
    """Top-level Reader API response. ``data`` is absent when nothing was extracted."""

    model_config = ConfigDict(extra="ignore")

    data: ExtractionResult | None = None
