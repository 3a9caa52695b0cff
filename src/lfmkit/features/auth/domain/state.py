"""Data structures that describe where a session is in its auth lifecycle."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class Unauthenticated:
    """Credentials only; read-only access."""


@dataclass(slots=True, frozen=True)
class TokenPending:
    """A web auth token awaits the user's approval in the browser."""

    token: str


@dataclass(slots=True, frozen=True)
class Authenticated:
    """A session key authorizes write access for a user."""

    session_key: str


SessionState = Unauthenticated | TokenPending | Authenticated


__all__ = ["Authenticated", "SessionState", "TokenPending", "Unauthenticated"]
