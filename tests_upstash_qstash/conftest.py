"""
Shared fixtures for upstash_qstash tests.
"""
import pytest
import respx

import httpx

from upstash_qstash.config import ClientConfig, resolve_config
from upstash_qstash.auth.auth_handler import BearerAuthHandler
from upstash_qstash.types import TransportResponse

BASE_URL = "https://qstash.example.com"
TOKEN = "qstash-test-token-0123456789"


@pytest.fixture
def resolved_config():
    """Resolved config pointing at a test base URL."""
    return resolve_config(ClientConfig(token=TOKEN, base_url=BASE_URL))


@pytest.fixture
def bearer_auth():
    return BearerAuthHandler(TOKEN)


@pytest.fixture
def router():
    """respx router; wire it into an httpx client via MockTransport."""
    return respx.MockRouter(assert_all_called=False)


@pytest.fixture
def async_httpx_client(router):
    return httpx.AsyncClient(transport=httpx.MockTransport(router.async_handler))


@pytest.fixture
def sync_httpx_client(router):
    return httpx.Client(transport=httpx.MockTransport(router.handler))


def make_response(status=200, text='{"messageId": "msg_123"}', reason="OK", headers=None):
    """Build a TransportResponse for stubbed transports."""
    return TransportResponse(status=status, reason=reason, headers=headers or {}, text=text)


@pytest.fixture
def response_factory():
    return make_response
