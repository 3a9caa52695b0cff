"""Where: src/lfmkit/features/services/base.py
What: Collaborator base for high-level Last.fm API wrappers.
Why: Wrappers compose over an identity tuple and share request/extraction helpers.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Self

from lfmkit.platform.lastfm.document import ResponseDocument
from lfmkit.platform.lastfm.http_client import HTTPClient
from lfmkit.platform.lastfm.request import execute_request
from lfmkit.shared.errors import InvalidCredentialsError
from lfmkit.shared.parameters import ParameterSet

from .extraction import Node, extract, extract_all

if TYPE_CHECKING:
    from lfmkit.features.auth.domain.session import Session


class ServiceBase:
    """Issue requests on behalf of an identity and read fields from responses.

    Subclasses describe a resource (track, artist, ...) and usually override
    ``_get_params`` so ``_request(method)`` carries the resource's identifying
    arguments.
    """

    def __init__(
        self,
        api_key: str,
        api_secret: str | None,
        session_key: str | None = None,
        *,
        http_client: HTTPClient | None = None,
    ) -> None:
        if not api_key:
            raise InvalidCredentialsError("api_key must be a non-empty string")
        self._api_key: str = api_key
        self._api_secret: str | None = api_secret or None
        self._session_key: str | None = session_key or None
        self._http_client: HTTPClient | None = http_client

    @classmethod
    def from_auth_data(
        cls,
        auth_data: Sequence[str | None],
        *,
        http_client: HTTPClient | None = None,
    ) -> Self:
        """Build from an ``(api_key, api_secret, session_key)`` tuple."""

        if len(auth_data) != 3:
            raise InvalidCredentialsError(
                f"auth_data must hold (api_key, api_secret, session_key), got {len(auth_data)} items"
            )
        api_key, api_secret, session_key = auth_data
        return cls(api_key or "", api_secret, session_key, http_client=http_client)

    @classmethod
    def from_session(cls, session: "Session") -> Self:
        return cls.from_auth_data(session.auth_data, http_client=session.http_client)

    @property
    def auth_data(self) -> tuple[str, str | None, str | None]:
        return (self._api_key, self._api_secret, self._session_key)

    def _get_params(self) -> ParameterSet:
        """Identifying parameters for this resource; empty by default."""

        return ParameterSet()

    def _request(
        self,
        method_name: str,
        parameters: Mapping[str, object] | None = None,
        *,
        must_sign: bool = False,
    ) -> ResponseDocument:
        if parameters is None:
            parameters = self._get_params()
        return execute_request(
            method_name,
            self._api_key,
            parameters,
            secret=self._api_secret,
            session_key=self._session_key,
            must_sign=must_sign,
            http_client=self._http_client,
        )

    @staticmethod
    def _extract(node: Node, name: str, index: int = 0) -> str:
        return extract(node, name, index)

    @staticmethod
    def _extract_all(node: Node, name: str, limit: int | None = None) -> list[str]:
        return extract_all(node, name, limit)


__all__ = ["ServiceBase"]
