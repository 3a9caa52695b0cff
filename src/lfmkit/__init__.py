"""lfmkit: Last.fm web service client core.

Session authentication (direct and browser-delegated), MD5 request signing,
and XML response extraction for higher-level API wrappers.

Basic usage::

    from lfmkit import Session

    session = Session(API_KEY, API_SECRET)
    url = session.get_web_authentication_url()
    # ask the user to approve ``url`` in a browser, then:
    session.complete_web_authentication()
"""

from __future__ import annotations

from lfmkit.features.auth import (
    Authenticated,
    Session,
    SessionRecord,
    SessionState,
    TokenPending,
    Unauthenticated,
)
from lfmkit.features.services import ServiceBase, extract, extract_all
from lfmkit.platform.lastfm.document import ResponseDocument
from lfmkit.platform.lastfm.http_client import HTTPClient, HTTPResult, LastfmHTTPClient
from lfmkit.platform.lastfm.request import Request, execute_request
from lfmkit.platform.lastfm.signing import md5, sign
from lfmkit.shared import (
    ExtractionRangeError,
    InvalidCredentialsError,
    InvalidStateError,
    LastfmError,
    NotFoundError,
    ParameterSet,
    ServiceError,
    ServiceErrorCode,
    TransportError,
)

__version__ = "0.1.0"

__all__ = [
    "Authenticated",
    "ExtractionRangeError",
    "HTTPClient",
    "HTTPResult",
    "InvalidCredentialsError",
    "InvalidStateError",
    "LastfmError",
    "LastfmHTTPClient",
    "NotFoundError",
    "ParameterSet",
    "Request",
    "ResponseDocument",
    "ServiceBase",
    "ServiceError",
    "ServiceErrorCode",
    "Session",
    "SessionRecord",
    "SessionState",
    "TokenPending",
    "TransportError",
    "Unauthenticated",
    "execute_request",
    "extract",
    "extract_all",
    "md5",
    "sign",
]
