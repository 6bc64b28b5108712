"""
Shared fixtures for mcp-untappd tests.
"""

import httpx
import pytest

from mcp_untappd.config import UntappdConfig


@pytest.fixture
def beer_info_body():
    return {
        "meta": {"code": 200},
        "response": {"beer": {"bid": 123, "beer_name": "Test IPA"}},
    }


@pytest.fixture
def config():
    return UntappdConfig(client_id="test-client-id", client_secret="test-secret")


@pytest.fixture
def sent_requests():
    """Requests seen by the mock transport, in order."""
    return []


@pytest.fixture
def make_transport(sent_requests):
    """Build an httpx.MockTransport answering every request the same way."""

    def _make(status_code=200, json=None, content=None, exc=None):
        def handler(request: httpx.Request) -> httpx.Response:
            sent_requests.append(request)
            if exc is not None:
                raise exc
            if content is not None:
                return httpx.Response(status_code, content=content)
            return httpx.Response(status_code, json=json)

        return httpx.MockTransport(handler)

    return _make
