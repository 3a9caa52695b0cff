"""Summary: Three-field record for persisting a session's identity.
Why: Let applications store and restore sessions without pickling live objects.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass
from typing import Any


@dataclass(slots=True, frozen=True)
class SessionRecord:
    """Persistable identity tuple; pending auth tokens are never stored."""

    api_key: str
    api_secret: str
    session_key: str | None = None

    def to_dict(self) -> dict[str, str | None]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SessionRecord":
        """Rebuild a record, rejecting missing or non-string fields."""

        api_key = data.get("api_key")
        api_secret = data.get("api_secret")
        session_key = data.get("session_key")
        if not isinstance(api_key, str) or not isinstance(api_secret, str):
            raise ValueError("Session record requires string 'api_key' and 'api_secret'")
        if session_key is not None and not isinstance(session_key, str):
            raise ValueError("Session record 'session_key' must be a string or null")
        return cls(api_key=api_key, api_secret=api_secret, session_key=session_key or None)


__all__ = ["SessionRecord"]
