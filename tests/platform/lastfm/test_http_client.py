"""Tests for the requests-backed HTTP adapter."""

from __future__ import annotations

from typing import Any

import pytest
import requests

from lfmkit.platform.lastfm import http_client
from lfmkit.platform.lastfm.http_client import LastfmHTTPClient
from lfmkit.shared.errors import TransportError


class _FakeResponse:
    def __init__(self, status_code: int, content: bytes) -> None:
        self.status_code = status_code
        self.content = content
        self.headers = {"Content-Type": "text/xml; charset=utf-8"}


def _patch_post(
    monkeypatch: pytest.MonkeyPatch,
    response: _FakeResponse | Exception,
    seen: dict[str, Any],
) -> None:
    def fake_post(url: str, **kwargs: Any) -> _FakeResponse:
        seen["url"] = url
        seen.update(kwargs)
        if isinstance(response, Exception):
            raise response
        return response

    monkeypatch.setattr(http_client.requests, "post", fake_post)


def test_post_form_sends_form_data_with_user_agent(monkeypatch: pytest.MonkeyPatch) -> None:
    seen: dict[str, Any] = {}
    _patch_post(monkeypatch, _FakeResponse(200, b'<lfm status="ok"/>'), seen)
    client = LastfmHTTPClient(timeout=3.5, user_agent="app/1.0")

    result = client.post_form("http://example.test/2.0/", {"method": "auth.getToken"})

    assert result.status == 200
    assert result.body == b'<lfm status="ok"/>'
    assert seen["url"] == "http://example.test/2.0/"
    assert seen["data"] == {"method": "auth.getToken"}
    assert seen["timeout"] == 3.5
    assert seen["headers"]["User-Agent"] == "app/1.0"


def test_network_failure_wraps_cause(monkeypatch: pytest.MonkeyPatch) -> None:
    cause = requests.ConnectionError("unreachable")
    _patch_post(monkeypatch, cause, {})

    with pytest.raises(TransportError) as excinfo:
        _ = LastfmHTTPClient().post_form("http://example.test/", {})

    assert excinfo.value.__cause__ is cause


def test_non_2xx_without_envelope_is_transport_error(monkeypatch: pytest.MonkeyPatch) -> None:
    _patch_post(monkeypatch, _FakeResponse(502, b"<html>Bad Gateway</html>"), {})

    with pytest.raises(TransportError) as excinfo:
        _ = LastfmHTTPClient().post_form("http://example.test/", {})

    assert excinfo.value.status == 502


def test_non_2xx_with_failed_envelope_is_returned(monkeypatch: pytest.MonkeyPatch) -> None:
    body = b'<?xml version="1.0"?>\n<lfm status="failed"><error code="4">Invalid authentication token</error></lfm>'
    _patch_post(monkeypatch, _FakeResponse(403, body), {})

    result = LastfmHTTPClient().post_form("http://example.test/", {})

    assert result.status == 403
    assert result.body == body
