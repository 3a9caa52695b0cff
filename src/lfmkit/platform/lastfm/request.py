"""Summary: Build, sign, send and validate one Last.fm web service call.
Why: Every API surface shares this pipeline, so its wire rules live in one place.
"""

from __future__ import annotations

import time
from collections.abc import Mapping
from typing import Final

from lfmkit.config import settings
from lfmkit.platform.logging import logger
from lfmkit.shared.errors import InvalidCredentialsError, LastfmError, ServiceError
from lfmkit.shared.parameters import ParameterSet

from . import http_client as _http
from .document import ResponseDocument
from .signing import sign

API_KEY_PARAM: Final[str] = "api_key"
METHOD_PARAM: Final[str] = "method"
SESSION_KEY_PARAM: Final[str] = "sk"
SIGNATURE_PARAM: Final[str] = "api_sig"


class Request:
    """A single web service operation.

    The caller's parameters are copied, then ``api_key``, ``method`` and,
    when present, ``sk`` are injected. Calls carrying a session key are
    always signed; others only after ``sign_it()``.
    """

    def __init__(
        self,
        method_name: str,
        api_key: str,
        parameters: Mapping[str, object] | None = None,
        secret: str | None = None,
        session_key: str | None = None,
        *,
        http_client: _http.HTTPClient | None = None,
    ) -> None:
        if not method_name or not method_name.strip():
            raise ValueError("method_name must be a non-empty string")

        self.method_name: str = method_name
        self.secret: str | None = secret
        self._http_client: _http.HTTPClient | None = http_client

        self.params: ParameterSet = ParameterSet(parameters)
        self.params[API_KEY_PARAM] = api_key
        self.params[METHOD_PARAM] = method_name
        self._signed: bool = False

        if session_key:
            self.params[SESSION_KEY_PARAM] = session_key
            self.sign_it()

    @property
    def signed(self) -> bool:
        return self._signed

    def sign_it(self) -> None:
        """Mark this request as signed; the signature is computed at send time."""

        if not self.secret:
            raise InvalidCredentialsError(
                f"Cannot sign '{self.method_name}' without an API secret"
            )
        self._signed = True

    def wire_parameters(self) -> ParameterSet:
        """Return the exact parameters that go on the wire."""

        wire = self.params.copy()
        _ = wire.pop(SIGNATURE_PARAM, None)
        if self._signed:
            if not self.secret:
                raise InvalidCredentialsError(
                    f"Cannot sign '{self.method_name}' without an API secret"
                )
            wire[SIGNATURE_PARAM] = sign(wire, self.secret)
        return wire

    def execute(self) -> ResponseDocument:
        """Send the request once and return the parsed, status-checked document."""

        wire = self.wire_parameters()
        client = self._http_client or _http.DEFAULT_HTTP_CLIENT
        log_extra = {
            "lastfm_method": self.method_name,
            "signed": self._signed,
            "param_names": sorted(
                name for name in wire if name not in {API_KEY_PARAM, METHOD_PARAM}
            ),
        }
        logger.debug(
            "Calling %s",
            self.method_name,
            extra={"request_event": "lastfm.request.start", **log_extra},
        )

        started = time.perf_counter()
        try:
            result = client.post_form(settings.API_ROOT_URL, wire)
            document = ResponseDocument.parse(result.body)
            document.raise_for_status()
        except ServiceError as exc:
            logger.debug(
                "%s failed: %s",
                self.method_name,
                exc,
                extra={
                    "request_event": "lastfm.request.failed",
                    "error_code": exc.code,
                    "error_message": exc.message,
                    **log_extra,
                },
            )
            raise
        except LastfmError as exc:
            logger.debug(
                "%s failed: %s",
                self.method_name,
                exc,
                extra={
                    "request_event": "lastfm.request.failed",
                    "error_message": str(exc),
                    **log_extra,
                },
            )
            raise

        logger.debug(
            "Completed %s",
            self.method_name,
            extra={
                "request_event": "lastfm.request.success",
                "duration_ms": (time.perf_counter() - started) * 1000.0,
                **log_extra,
            },
        )
        return document


def execute_request(
    method_name: str,
    api_key: str,
    parameters: Mapping[str, object] | None = None,
    *,
    secret: str | None = None,
    session_key: str | None = None,
    must_sign: bool = False,
    http_client: _http.HTTPClient | None = None,
) -> ResponseDocument:
    """Functional form of ``Request(...).execute()``.

    Args:
        method_name: Web service method, e.g. ``auth.getToken``.
        api_key: The caller's API key.
        parameters: Method-specific arguments; never mutated.
        secret: Shared secret, required whenever the call is signed.
        session_key: User session key; its presence forces signing.
        must_sign: Sign even without a session key.
        http_client: Transport override; defaults to ``DEFAULT_HTTP_CLIENT``.

    Returns:
        ResponseDocument: Parsed response with ``status="ok"``.
    """

    request = Request(
        method_name,
        api_key,
        parameters,
        secret,
        session_key,
        http_client=http_client,
    )
    if must_sign:
        request.sign_it()
    return request.execute()


__all__ = [
    "API_KEY_PARAM",
    "METHOD_PARAM",
    "Request",
    "SESSION_KEY_PARAM",
    "SIGNATURE_PARAM",
    "execute_request",
]
