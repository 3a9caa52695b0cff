# Path: `src/lfmkit/features/auth/__init__.py`
# Summary: Export session authentication domain symbols.
# Why: Provide a stable import surface for applications and tests.

from .domain.record import SessionRecord
from .domain.session import Session
from .domain.state import Authenticated, SessionState, TokenPending, Unauthenticated

__all__ = [
    "Authenticated",
    "Session",
    "SessionRecord",
    "SessionState",
    "TokenPending",
    "Unauthenticated",
]
