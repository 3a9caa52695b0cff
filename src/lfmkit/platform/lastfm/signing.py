"""Summary: Deterministic MD5 request signatures for the Last.fm API.
Why: The service authenticates calls by this exact digest, so it stays pure.
"""

from __future__ import annotations

import hashlib
from collections.abc import Mapping
from typing import Final

from lfmkit.shared.parameters import ParameterSet

SIGNATURE_KEYS: Final[frozenset[str]] = frozenset({"api_sig", "signature"})


def md5(text: str) -> str:
    """Return the lowercase hex MD5 digest of ``text`` encoded as UTF-8.

    Also used by callers to pre-hash passwords for the direct auth flow.
    """

    return hashlib.md5(text.encode("utf-8")).hexdigest()


def signature_base(params: Mapping[str, str], secret: str) -> str:
    """Build the string the signature digests: sorted ``key + value`` pairs plus secret."""

    items = ParameterSet(params).sorted_items(exclude=SIGNATURE_KEYS)
    return "".join(key + value for key, value in items) + secret


def sign(params: Mapping[str, str], secret: str) -> str:
    """Compute ``api_sig`` for ``params``.

    Keys are ordered by code point (``sorted`` on ``str``), never by locale,
    and any existing signature key is ignored.
    """

    return md5(signature_base(params, secret))


__all__ = ["SIGNATURE_KEYS", "md5", "sign", "signature_base"]
