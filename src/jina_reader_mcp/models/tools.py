from __future__ import annotations

import math
from typing import Any, ClassVar, Literal, get_args

from pydantic import BaseModel, field_validator

# "none" lets the Reader API pick its default engine.
Engine = Literal["none", "direct", "browser", "cf-browser-rendering"]
ENGINES: tuple[str, ...] = get_args(Engine)

ENGINE_DESCRIPTION = (
    "Engine to use: none (default), direct (speed), browser (quality), "
    "cf-browser-rendering (experimental)"
)


def _is_number(v: Any) -> bool:
    return isinstance(v, int | float) and not isinstance(v, bool)


def _truncate(v: Any, name: str) -> Any:
    """Truncate a finite number to int; other types are left to pydantic."""
    if not _is_number(v):
        return v
    if not math.isfinite(v):
        raise ValueError(f"{name} must be a finite number")
    return int(v)


class ReadInput(BaseModel):
    # Name of the field forwarded to the Reader API; set by each subclass.
    payload_field: ClassVar[str]

    engine: Engine = "none"
    max_length: int | None = None
    start_index: int | None = None

    @field_validator("max_length", mode="before")
    @classmethod
    def validate_max_length(cls, v: Any) -> Any:
        if _is_number(v) and v <= 0:
            raise ValueError("max_length must be > 0")
        v = _truncate(v, "max_length")
        # Fractions below one would truncate to 0, which the formatter treats as unset.
        return max(v, 1) if _is_number(v) else v

    @field_validator("start_index", mode="before")
    @classmethod
    def validate_start_index(cls, v: Any) -> Any:
        if _is_number(v) and v < 0:
            raise ValueError("start_index must be >= 0")
        return _truncate(v, "start_index")

    def payload(self) -> dict[str, str]:
        """The single payload field forwarded to the Reader API."""
        return {self.payload_field: getattr(self, self.payload_field)}


class ReadUrlInput(ReadInput):
    payload_field: ClassVar[str] = "url"

    url: str

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        v = v.strip()
        if len(v) > 2048:
            raise ValueError("url must not exceed 2048 characters")
        if not v.startswith(("http://", "https://")):
            raise ValueError("url must use http or https scheme")
        if not v.split("://", 1)[1].split("/", 1)[0]:
            raise ValueError("url must include a host")
        return v


class ReadHtmlInput(ReadInput):
    payload_field: ClassVar[str] = "html"

    html: str


class ReadPdfInput(ReadInput):
    payload_field: ClassVar[str] = "pdf"

    pdf: str  # Base64-encoded PDF

    @field_validator("pdf")
    @classmethod
    def validate_pdf(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("pdf must not be empty")
        return v


class ReadOutcome(BaseModel):
    """Result of a read tool: formatted text on success, an error message otherwise."""

    text: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def render(self) -> str:
        if self.error is not None:
            return f"Error: {self.error}"
        return self.text or ""
