"""Summary: Parsed Last.fm XML response with tag lookup and status checks.
Why: Give the executor and extractors one typed view of the ``<lfm>`` envelope.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Final

from lfmkit.shared.errors import NotFoundError, ServiceError, TransportError

ROOT_TAG: Final[str] = "lfm"
STATUS_OK: Final[str] = "ok"
_UNKNOWN_FAILURE: Final[str] = "Unknown service failure"


class ResponseDocument:
    """Tree of named elements produced from a raw response body."""

    __slots__ = ("root",)

    def __init__(self, root: ET.Element) -> None:
        self.root: ET.Element = root

    @classmethod
    def parse(cls, body: str | bytes) -> "ResponseDocument":
        """Parse ``body``; malformed XML is a transport-level failure."""

        try:
            root = ET.fromstring(body)
        except ET.ParseError as exc:
            raise TransportError(f"Malformed response body: {exc}") from exc
        if root.tag != ROOT_TAG:
            raise TransportError(f"Unexpected response root <{root.tag}>, expected <{ROOT_TAG}>")
        return cls(root)

    @property
    def status(self) -> str | None:
        return self.root.get("status")

    @property
    def is_ok(self) -> bool:
        return self.status == STATUS_OK

    def find_all(self, tag: str) -> list[ET.Element]:
        """Return every element named ``tag`` in document order."""

        return list(self.root.iter(tag))

    def element(self, tag: str, index: int = 0) -> ET.Element:
        """Return the ``index``-th element named ``tag``."""

        matches = self.find_all(tag)
        if index < 0 or index >= len(matches):
            raise NotFoundError(
                f"Element <{tag}> #{index} not found ({len(matches)} present)"
            )
        return matches[index]

    def raise_for_status(self) -> None:
        """Raise ``ServiceError`` when the envelope reports failure."""

        if self.is_ok:
            return

        error = self.root.find(".//error")
        if error is None:
            raise ServiceError(0, _UNKNOWN_FAILURE)

        raw_code = (error.get("code") or "").strip()
        code = int(raw_code) if raw_code.isdigit() else 0
        message = (error.text or "").strip() or _UNKNOWN_FAILURE
        raise ServiceError(code, message)


__all__ = ["ResponseDocument", "ROOT_TAG", "STATUS_OK"]
