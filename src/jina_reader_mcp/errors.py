"""Error types raised by the upstream client and reported by the tool handlers."""

from __future__ import annotations

from enum import StrEnum


class ErrorCode(StrEnum):
    INVALID_INPUT = "INVALID_INPUT"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    UPSTREAM_HTTP_ERROR = "UPSTREAM_HTTP_ERROR"
    UPSTREAM_UNAVAILABLE = "UPSTREAM_UNAVAILABLE"
    UPSTREAM_PARSE_ERROR = "UPSTREAM_PARSE_ERROR"


class ReaderError(Exception):
    """Base error carrying a machine-readable code and a recoverability hint."""

    def __init__(self, code: ErrorCode, message: str, *, recoverable: bool = False) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.recoverable = recoverable


class AuthConfigurationError(ReaderError):
    def __init__(
        self,
        message: str = "JINA_API_KEY not configured. Please set it in your .env file.",
    ) -> None:
        super().__init__(ErrorCode.CONFIGURATION_ERROR, message, recoverable=False)


class UpstreamHttpError(ReaderError):
    """Non-2xx response from the Reader API."""

    def __init__(self, status_code: int) -> None:
        recoverable = status_code == 429 or status_code >= 500
        super().__init__(
            ErrorCode.UPSTREAM_HTTP_ERROR,
            f"Jina API error: {status_code}",
            recoverable=recoverable,
        )
        self.status_code = status_code


class UpstreamNetworkError(ReaderError):
    def __init__(self, message: str) -> None:
        super().__init__(ErrorCode.UPSTREAM_UNAVAILABLE, message, recoverable=True)


class UpstreamParseError(ReaderError):
    def __init__(self, message: str) -> None:
        super().__init__(ErrorCode.UPSTREAM_PARSE_ERROR, message, recoverable=False)
