"""In-memory stand-ins for the Last.fm HTTP boundary used across tests."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from lfmkit.platform.lastfm.http_client import HTTPResult

OK_TOKEN = '<lfm status="ok"><token>TOKEN42</token></lfm>'
OK_SESSION = '<lfm status="ok"><session><name>alice</name><key>ABC123</key><subscriber>0</subscriber></session></lfm>'
FAILED_TOKEN = '<lfm status="failed"><error code="4">Invalid authentication token</error></lfm>'


@dataclass
class FakeHTTPClient:
    """Answer each ``method`` parameter with a canned body and record calls."""

    responses: dict[str, bytes | Exception] = field(default_factory=dict)
    calls: list[tuple[str, dict[str, str]]] = field(default_factory=list)

    def respond(self, method: str, body: str | bytes | Exception) -> None:
        self.responses[method] = body.encode("utf-8") if isinstance(body, str) else body

    def post_form(self, url: str, params: Mapping[str, str]) -> HTTPResult:
        self.calls.append((url, dict(params)))
        answer = self.responses.get(params.get("method", ""))
        if answer is None:
            raise AssertionError(f"Unexpected call to {params.get('method')!r}")
        if isinstance(answer, Exception):
            raise answer
        return HTTPResult(status=200, headers={}, body=answer)

    @property
    def last_params(self) -> dict[str, str]:
        assert self.calls, "no request was sent"
        return self.calls[-1][1]


__all__ = ["FAILED_TOKEN", "FakeHTTPClient", "OK_SESSION", "OK_TOKEN"]
