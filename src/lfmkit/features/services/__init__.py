# Path: `src/lfmkit/features/services/__init__.py`
# Summary: Export the API collaborator base and extraction helpers.
# Why: High-level wrappers import one module instead of reaching into internals.

from .base import ServiceBase
from .extraction import extract, extract_all

__all__ = ["ServiceBase", "extract", "extract_all"]
