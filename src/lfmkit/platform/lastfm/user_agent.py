"""Where: src/lfmkit/platform/lastfm/user_agent.py
What: Build the User-Agent string sent with Last.fm requests.
Why: Centralise client identity shared by HTTP adapters and tests.
"""

from __future__ import annotations

from lfmkit.config.settings import APP_NAME, APP_VERSION, CONTACT


def format_user_agent(app_name: str, app_version: str, contact: str) -> str:
    """Return ``App/Version (contact)`` when contact information is available."""

    stripped = contact.strip()
    if stripped:
        return f"{app_name}/{app_version} ({stripped})"
    return f"{app_name}/{app_version}"


def default_user_agent() -> str:
    """User agent derived from configured client identity."""

    return format_user_agent(APP_NAME, APP_VERSION, CONTACT)


__all__ = [
    "default_user_agent",
    "format_user_agent",
]
