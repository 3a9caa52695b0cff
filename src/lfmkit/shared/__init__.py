"""Shared value types and error hierarchy."""

from __future__ import annotations

from .errors import (
    ExtractionRangeError,
    InvalidCredentialsError,
    InvalidStateError,
    LastfmError,
    NotFoundError,
    ServiceError,
    ServiceErrorCode,
    TransportError,
)
from .parameters import ParameterSet

__all__ = [
    "ExtractionRangeError",
    "InvalidCredentialsError",
    "InvalidStateError",
    "LastfmError",
    "NotFoundError",
    "ParameterSet",
    "ServiceError",
    "ServiceErrorCode",
    "TransportError",
]
