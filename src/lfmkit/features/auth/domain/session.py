"""Where: src/lfmkit/features/auth/domain/session.py
What: Identity and authentication lifecycle for a Last.fm API consumer.
Why: Keep both auth flows and their state transitions behind one value type.

A session holding only an API key and secret is unauthenticated: it can read
public data but not act on behalf of a user. Two flows produce a session key:

- direct: ``authenticate_direct(username, md5(password))``
- browser-delegated: ``get_web_authentication_url()``, let the user approve
  the page, then ``complete_web_authentication()``

A single ``Session`` is not safe for concurrent auth attempts; serialize them.
"""

from __future__ import annotations

import re
from typing import Final

from lfmkit.config import settings
from lfmkit.features.services.extraction import extract
from lfmkit.platform.lastfm.http_client import HTTPClient
from lfmkit.platform.lastfm.request import Request
from lfmkit.platform.lastfm.signing import md5
from lfmkit.platform.logging import logger
from lfmkit.shared.errors import InvalidCredentialsError, InvalidStateError
from lfmkit.shared.parameters import ParameterSet

from .record import SessionRecord
from .state import Authenticated, SessionState, TokenPending, Unauthenticated

_WHITESPACE: Final[re.Pattern[str]] = re.compile(r"\s")

METHOD_GET_MOBILE_SESSION: Final[str] = "auth.getMobileSession"
METHOD_GET_TOKEN: Final[str] = "auth.getToken"
METHOD_GET_SESSION: Final[str] = "auth.getSession"


def _validate_credential(name: str, value: object) -> str:
    if not isinstance(value, str) or not value:
        raise InvalidCredentialsError(f"{name} must be a non-empty string")
    if _WHITESPACE.search(value):
        raise InvalidCredentialsError(f"{name} must not contain whitespace")
    return value


class Session:
    """Your identity tokens provided by Last.fm.

    Equality compares ``(api_key, api_secret, session_key)``; a pending web
    auth token is not part of the identity.
    """

    __hash__ = None  # type: ignore[assignment]  # mutable; hash ``to_record()`` instead

    def __init__(
        self,
        api_key: str,
        api_secret: str,
        session_key: str | None = None,
        *,
        http_client: HTTPClient | None = None,
    ) -> None:
        self._api_key: Final[str] = _validate_credential("api_key", api_key)
        self._api_secret: Final[str] = _validate_credential("api_secret", api_secret)
        self._authenticated: Authenticated | None = (
            Authenticated(session_key) if session_key else None
        )
        self._pending: TokenPending | None = None
        self._http_client: HTTPClient | None = http_client

    # Identity -----------------------------------------------------------------

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def api_secret(self) -> str:
        return self._api_secret

    @property
    def session_key(self) -> str | None:
        return self._authenticated.session_key if self._authenticated else None

    @property
    def pending_token(self) -> str | None:
        return self._pending.token if self._pending else None

    @property
    def http_client(self) -> HTTPClient | None:
        return self._http_client

    @property
    def state(self) -> SessionState:
        """Current lifecycle state; an established session key wins over a pending token."""

        if self._authenticated is not None:
            return self._authenticated
        if self._pending is not None:
            return self._pending
        return Unauthenticated()

    @property
    def auth_data(self) -> tuple[str, str, str | None]:
        """Identity tuple handed to API collaborators."""

        return (self._api_key, self._api_secret, self.session_key)

    def is_authenticated(self) -> bool:
        return self._authenticated is not None

    # Authentication flows ---------------------------------------------------

    def authenticate_direct(self, username: str, md5_password: str) -> str:
        """Exchange a username and MD5-hashed password for a session key.

        The password must already be hashed by the caller; the auth token is
        ``md5(username + md5_password)``.

        Returns:
            str: The new session key.

        Raises:
            ServiceError: The service rejected the credentials. State is unchanged.
        """

        params = ParameterSet(username=username, authToken=md5(username + md5_password))
        request = self._request(METHOD_GET_MOBILE_SESSION, params)
        request.sign_it()
        session_key = extract(request.execute(), "key")

        self._establish(session_key, METHOD_GET_MOBILE_SESSION)
        return session_key

    def get_web_authentication_url(self) -> str:
        """Fetch a fresh auth token and return the page the user must approve.

        Any previously pending token is replaced.
        """

        document = self._request(METHOD_GET_TOKEN, ParameterSet()).execute()
        token = extract(document, "token")
        self._pending = TokenPending(token)
        logger.info(
            "Web authentication token obtained",
            extra={"request_event": "lastfm.auth.token", "lastfm_method": METHOD_GET_TOKEN},
        )

        return f"{settings.AUTH_URL}?api_key={self._api_key}&token={token}"

    def complete_web_authentication(self) -> str:
        """Exchange the approved pending token for a session key.

        Returns:
            str: The new session key.

        Raises:
            InvalidStateError: ``get_web_authentication_url()`` was never called.
            ServiceError: The token is unapproved or expired. The pending
                token is kept so the call can be repeated after approval.
        """

        if self._pending is None:
            raise InvalidStateError(
                "No pending web authentication token; call get_web_authentication_url() first"
            )

        request = self._request(METHOD_GET_SESSION, ParameterSet(token=self._pending.token))
        request.sign_it()
        session_key = extract(request.execute(), "key")

        self._pending = None
        self._establish(session_key, METHOD_GET_SESSION)
        return session_key

    def _request(self, method_name: str, params: ParameterSet) -> Request:
        # Auth calls never carry an existing session key.
        return Request(
            method_name,
            self._api_key,
            params,
            self._api_secret,
            http_client=self._http_client,
        )

    def _establish(self, session_key: str, via: str) -> None:
        self._authenticated = Authenticated(session_key)
        logger.info(
            "Session authenticated",
            extra={"request_event": "lastfm.auth.success", "lastfm_method": via},
        )

    # Persistence ------------------------------------------------------------

    def to_record(self) -> SessionRecord:
        return SessionRecord(self._api_key, self._api_secret, self.session_key)

    @classmethod
    def from_record(
        cls,
        record: SessionRecord,
        *,
        http_client: HTTPClient | None = None,
    ) -> "Session":
        return cls(
            record.api_key,
            record.api_secret,
            record.session_key,
            http_client=http_client,
        )

    # Value semantics ----------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Session):
            return NotImplemented
        return self.auth_data == other.auth_data

    def __repr__(self) -> str:
        state = type(self.state).__name__
        return f"Session(api_key={self._api_key!r}, state={state})"


__all__ = [
    "METHOD_GET_MOBILE_SESSION",
    "METHOD_GET_SESSION",
    "METHOD_GET_TOKEN",
    "Session",
]
