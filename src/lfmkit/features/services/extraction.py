"""Summary: Pull text values out of Last.fm XML responses by tag name.
Why: Shape mismatches must surface as errors rather than silent defaults.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET

from lfmkit.platform.lastfm.document import ResponseDocument
from lfmkit.shared.errors import ExtractionRangeError

Node = ResponseDocument | ET.Element


def _document(node: Node) -> ResponseDocument:
    # Sub-trees get the same lookup and bounds rules as whole responses.
    return node if isinstance(node, ResponseDocument) else ResponseDocument(node)


def _text(element: ET.Element) -> str:
    return "".join(element.itertext()).strip()


def extract(node: Node, name: str, index: int = 0) -> str:
    """Return the text of the ``index``-th ``<name>`` element under ``node``.

    Text includes nested elements; elements without text yield ``""``.

    Raises:
        NotFoundError: Fewer than ``index + 1`` matching elements exist.
    """

    return _text(_document(node).element(name, index))


def extract_all(node: Node, name: str, limit: int | None = None) -> list[str]:
    """Return the text of every ``<name>`` element, or of the first ``limit``.

    Raises:
        ExtractionRangeError: ``limit`` exceeds the number of matches.
        ValueError: ``limit`` is negative.
    """

    matches = _document(node).find_all(name)
    if limit is None:
        limit = len(matches)
    elif limit < 0:
        raise ValueError(f"limit must be >= 0, got {limit}")
    elif limit > len(matches):
        raise ExtractionRangeError(
            f"Requested {limit} <{name}> elements but only {len(matches)} present"
        )
    return [_text(element) for element in matches[:limit]]


__all__ = ["Node", "extract", "extract_all"]
