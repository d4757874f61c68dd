"""Shared pytest fixtures for hubkit tests.

Fixture Organization:
    - Environment fixtures: isolate HubkitConfig from the developer's shell
    - Mock fixtures: AsyncMock ApiConnection / Connection for endpoint clients
    - Response fixtures: real httpx.Response objects for transport tests
"""

import os
from unittest.mock import AsyncMock, Mock

import httpx
import pytest

from hubkit.config import reset_config
from hubkit.http import ApiConnection, Connection

# =============================================================================
# Environment Isolation
# =============================================================================


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Drop hubkit/GitHub variables and reset the cached config around each test."""
    for key in list(os.environ):
        if key.upper().startswith(("HUBKIT_", "GITHUB_")):
            monkeypatch.delenv(key, raising=False)
    reset_config()
    yield
    reset_config()


# =============================================================================
# Endpoint Client Mocks
# =============================================================================


@pytest.fixture
def api():
    """ApiConnection double; ``api.connection`` is a Connection double."""
    api_connection = AsyncMock(spec=ApiConnection)
    api_connection.connection = AsyncMock(spec=Connection)
    return api_connection


@pytest.fixture
def status_response():
    """Build a minimal ApiResponse stand-in carrying only a status code."""

    def _build(status_code: int) -> Mock:
        response = Mock()
        response.status_code = status_code
        response.headers = httpx.Headers()
        response.body = None
        return response

    return _build


# =============================================================================
# Transport Fixtures
# =============================================================================


@pytest.fixture
def make_response():
    """Build real httpx.Response objects with GitHub-style headers."""

    def _build(
        status_code: int = 200,
        json_data=None,
        headers: dict | None = None,
        text: str | None = None,
    ) -> httpx.Response:
        _headers = {
            "X-RateLimit-Limit": "5000",
            "X-RateLimit-Remaining": "4999",
            "X-RateLimit-Reset": "1700000000",
        }
        if headers:
            _headers.update(headers)
        if json_data is not None:
            return httpx.Response(status_code, json=json_data, headers=_headers)
        if text is not None:
            return httpx.Response(status_code, text=text, headers=_headers)
        return httpx.Response(status_code, headers=_headers)

    return _build


@pytest.fixture
def connection():
    """Connection with a token; tests patch ``connection._client.request``."""
    return Connection("ghp_test_token_123")
