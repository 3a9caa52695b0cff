"""Where: src/lfmkit/platform/lastfm/http_client.py
What: HTTP adapter posting form-encoded calls to the Last.fm web service.
Why: Decouple network concerns from signing, parsing and session state.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final, Protocol, Self, cast

import requests

from lfmkit.config.settings import (
    APP_NAME,
    APP_VERSION,
    CONTACT,
    HTTP_TIMEOUT_SECONDS,
    validated_timeout,
)
from lfmkit.platform.logging import logger
from lfmkit.shared.errors import TransportError

from .user_agent import default_user_agent, format_user_agent

if TYPE_CHECKING:
    from lfmkit.config.config import Config

# Last.fm answers API errors with 4xx codes but still sends the XML envelope.
_FAILED_ENVELOPE: Final[re.Pattern[bytes]] = re.compile(rb"<lfm\b[^>]*\bstatus=[\"']failed[\"']")


@dataclass(slots=True)
class HTTPResult:
    """Represent an HTTP response relevant to the Last.fm client."""

    status: int
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""


class HTTPClient(Protocol):
    """Protocol for HTTP clients able to POST form parameters."""

    def post_form(self, url: str, params: Mapping[str, str]) -> HTTPResult:
        ...


class LastfmHTTPClient:
    """Perform a single POST per call using ``requests``; never retries."""

    def __init__(
        self,
        *,
        timeout: float | None = None,
        user_agent: str | None = None,
    ) -> None:
        self.timeout: float = timeout if timeout is not None else HTTP_TIMEOUT_SECONDS
        self.user_agent: str = user_agent or default_user_agent()

    @classmethod
    def from_config(cls, config: Config) -> Self:
        """Build a client from an explicitly loaded ``Config``."""

        user_agent = format_user_agent(
            config.app_name or APP_NAME,
            config.app_version or APP_VERSION,
            config.contact or CONTACT,
        )
        return cls(timeout=validated_timeout(config.http_timeout), user_agent=user_agent)

    def post_form(self, url: str, params: Mapping[str, str]) -> HTTPResult:
        headers = {
            "Content-Type": "application/x-www-form-urlencoded",
            "Accept-Charset": "utf-8",
            "User-Agent": self.user_agent,
        }

        try:
            response = requests.post(url, data=dict(params), headers=headers, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.warning("Last.fm request error: %s", exc)
            raise TransportError(f"Request to {url} failed: {exc}") from exc

        status = int(response.status_code)
        header_items = cast(Iterable[tuple[str, str]], response.headers.items())
        response_headers = {str(key): str(value) for key, value in header_items}
        body = response.content or b""

        if not 200 <= status < 300 and not _FAILED_ENVELOPE.search(body):
            logger.warning("Last.fm HTTP error: status=%s", status)
            raise TransportError(f"Last.fm returned HTTP {status}", status=status)

        return HTTPResult(status=status, headers=response_headers, body=body)


DEFAULT_HTTP_CLIENT = LastfmHTTPClient()


__all__ = [
    "DEFAULT_HTTP_CLIENT",
    "HTTPClient",
    "HTTPResult",
    "LastfmHTTPClient",
]
