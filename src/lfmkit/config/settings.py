"""Where: src/lfmkit/config/settings.py
What: Fixed service endpoints and runtime defaults derived from ``Config()``.
Why: Expose validated constants to the request layer without file I/O.
Trade-offs: - Validation is limited to simple boundary checks.
"""

from __future__ import annotations

from typing import Final

from lfmkit.config.config import (
    HTTP_TIMEOUT_DEFAULT,
    config as app_config,
)

# Web service endpoints -------------------------------------------------------

API_ROOT_URL: Final[str] = "http://ws.audioscrobbler.com/2.0/"

# Browser hand-off page; the query string is appended verbatim.
AUTH_URL: Final[str] = "http://www.last.fm/api/auth/"


def validated_timeout(value: object) -> float:
    """Return ``value`` as seconds, or the default when not a positive number."""

    if isinstance(value, (int, float)) and not isinstance(value, bool) and value > 0:
        return float(value)
    return HTTP_TIMEOUT_DEFAULT


HTTP_TIMEOUT_SECONDS: float = validated_timeout(getattr(app_config, "http_timeout", None))


# Client identity ---------------------------------------------------------------

APP_NAME: str = app_config.app_name or "lfmkit"
APP_VERSION: str = app_config.app_version or "0.1.0"
CONTACT: str = app_config.contact or ""


__all__ = [
    "API_ROOT_URL",
    "AUTH_URL",
    "HTTP_TIMEOUT_SECONDS",
    "APP_NAME",
    "APP_VERSION",
    "CONTACT",
    "validated_timeout",
]
