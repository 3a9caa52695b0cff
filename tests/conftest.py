"""Shared pytest fixtures for Last.fm client tests."""

from __future__ import annotations

import pytest

from lastfm_fakes import FakeHTTPClient


@pytest.fixture
def fake_http() -> FakeHTTPClient:
    """Provide a transport that never touches the network."""

    return FakeHTTPClient()
