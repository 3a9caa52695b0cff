"""
Summary: Validate parameter injection, signing and status handling of requests.
Why: These wire rules are shared by every Last.fm API call.
"""

from __future__ import annotations

import pytest

from lastfm_fakes import FakeHTTPClient, OK_TOKEN
from lfmkit.config import settings
from lfmkit.platform.lastfm.request import Request, execute_request
from lfmkit.platform.lastfm.signing import sign
from lfmkit.shared.errors import InvalidCredentialsError, ServiceError, TransportError
from lfmkit.shared.parameters import ParameterSet


def test_unsigned_request_injects_api_key_and_method(fake_http: FakeHTTPClient) -> None:
    fake_http.respond("auth.getToken", OK_TOKEN)

    doc = execute_request("auth.getToken", "K", http_client=fake_http)

    url, params = fake_http.calls[0]
    assert url == settings.API_ROOT_URL
    assert params == {"api_key": "K", "method": "auth.getToken"}
    assert doc.is_ok


def test_must_sign_adds_signature_over_full_parameter_set(fake_http: FakeHTTPClient) -> None:
    fake_http.respond("auth.getToken", OK_TOKEN)

    _ = execute_request("auth.getToken", "K", secret="S", must_sign=True, http_client=fake_http)

    params = fake_http.last_params
    unsigned = {key: value for key, value in params.items() if key != "api_sig"}
    assert params["api_sig"] == sign(unsigned, "S")
    assert params["api_sig"] == sign({"api_key": "K", "method": "auth.getToken"}, "S")


def test_session_key_forces_signing_and_is_signed_over(fake_http: FakeHTTPClient) -> None:
    fake_http.respond("track.love", '<lfm status="ok"/>')

    _ = execute_request(
        "track.love",
        "K",
        {"artist": "Cher", "track": "Believe"},
        secret="S",
        session_key="SK",
        http_client=fake_http,
    )

    params = fake_http.last_params
    assert params["sk"] == "SK"
    expected = sign(
        {"api_key": "K", "method": "track.love", "sk": "SK", "artist": "Cher", "track": "Believe"},
        "S",
    )
    assert params["api_sig"] == expected


def test_caller_parameters_are_not_mutated(fake_http: FakeHTTPClient) -> None:
    fake_http.respond("artist.getInfo", '<lfm status="ok"/>')
    caller_params = ParameterSet(artist="Cher")

    _ = execute_request("artist.getInfo", "K", caller_params, http_client=fake_http)

    assert dict(caller_params) == {"artist": "Cher"}


def test_stale_signature_is_replaced(fake_http: FakeHTTPClient) -> None:
    fake_http.respond("auth.getToken", OK_TOKEN)

    request = Request("auth.getToken", "K", {"api_sig": "stale"}, "S", http_client=fake_http)
    request.sign_it()
    _ = request.execute()

    assert fake_http.last_params["api_sig"] == sign({"api_key": "K", "method": "auth.getToken"}, "S")


def test_signing_without_secret_fails_fast() -> None:
    request = Request("auth.getToken", "K")

    with pytest.raises(InvalidCredentialsError):
        request.sign_it()


def test_empty_method_name_rejected() -> None:
    with pytest.raises(ValueError):
        _ = Request("", "K")


def test_service_failure_raises_service_error(fake_http: FakeHTTPClient) -> None:
    fake_http.respond(
        "auth.getSession",
        '<lfm status="failed"><error code="14">Unauthorized Token - This token has not been issued</error></lfm>',
    )

    with pytest.raises(ServiceError) as excinfo:
        _ = execute_request("auth.getSession", "K", {"token": "T"}, secret="S", must_sign=True, http_client=fake_http)

    assert excinfo.value.code == 14
    assert len(fake_http.calls) == 1


def test_transport_error_propagates_without_retry(fake_http: FakeHTTPClient) -> None:
    fake_http.respond("auth.getToken", TransportError("connection refused"))

    with pytest.raises(TransportError):
        _ = execute_request("auth.getToken", "K", http_client=fake_http)

    assert len(fake_http.calls) == 1


def test_default_client_used_when_none_given(
    monkeypatch: pytest.MonkeyPatch, fake_http: FakeHTTPClient
) -> None:
    from lfmkit.platform.lastfm import http_client

    fake_http.respond("auth.getToken", OK_TOKEN)
    monkeypatch.setattr(http_client, "DEFAULT_HTTP_CLIENT", fake_http)

    doc = execute_request("auth.getToken", "K")

    assert doc.is_ok
    assert fake_http.last_params["method"] == "auth.getToken"


def test_secret_removed_after_sign_it_fails_before_sending(fake_http: FakeHTTPClient) -> None:
    request = Request("track.love", "K", {"track": "Believe"}, secret="S", http_client=fake_http)
    request.sign_it()
    request.secret = None

    with pytest.raises(InvalidCredentialsError):
        _ = request.execute()

    assert fake_http.calls == []
