"""Summary: Exception hierarchy raised by the Last.fm client layers.
Why: Let callers tell service rejections apart from transport and usage errors.
"""

from __future__ import annotations

from enum import IntEnum


class LastfmError(Exception):
    """Base class for every error raised by lfmkit."""


class InvalidCredentialsError(LastfmError, ValueError):
    """API key or secret missing or malformed."""


class InvalidStateError(LastfmError):
    """Operation invoked out of the required session state order."""


class NotFoundError(LastfmError, LookupError):
    """Expected element absent from a response document."""


class ExtractionRangeError(NotFoundError, IndexError):
    """Requested more elements than the response document contains."""


class TransportError(LastfmError):
    """Network, HTTP status or body-parsing failure below the service layer."""

    def __init__(self, message: str, *, status: int | None = None) -> None:
        super().__init__(message)
        self.status: int | None = status


class ServiceErrorCode(IntEnum):
    """Error codes documented by the Last.fm web service."""

    INVALID_SERVICE = 2
    INVALID_METHOD = 3
    AUTH_FAILED = 4
    INVALID_FORMAT = 5
    INVALID_PARAMS = 6
    INVALID_RESOURCE = 7
    OPERATION_FAILED = 8
    INVALID_SESSION_KEY = 9
    INVALID_API_KEY = 10
    SERVICE_OFFLINE = 11
    SUBSCRIBERS_ONLY = 12
    INVALID_SIGNATURE = 13
    TOKEN_UNAUTHORIZED = 14
    TOKEN_EXPIRED = 15
    TEMPORARILY_UNAVAILABLE = 16
    SUSPENDED_API_KEY = 26
    RATE_LIMIT_EXCEEDED = 29


class ServiceError(LastfmError):
    """Failure envelope reported by the web service.

    Attributes:
        code: Numeric error code from ``<error code="...">``.
        message: Human readable text supplied by the service.
    """

    def __init__(self, code: int, message: str) -> None:
        super().__init__(f"[{code}] {message}")
        self.code: int = code
        self.message: str = message

    @property
    def kind(self) -> ServiceErrorCode | None:
        """Return the documented code member, or ``None`` for unknown codes."""

        try:
            return ServiceErrorCode(self.code)
        except ValueError:
            return None


__all__ = [
    "ExtractionRangeError",
    "InvalidCredentialsError",
    "InvalidStateError",
    "LastfmError",
    "NotFoundError",
    "ServiceError",
    "ServiceErrorCode",
    "TransportError",
]
