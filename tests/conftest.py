"""Shared test fixtures."""

import pytest
import pytest_asyncio

from gupay import GUPayClient, GUPayConfig
from gupay.mock import MockGUPayProvider

API_KEY = "skey_test_5ep1wqxd2kz"
SERVICE_ID = "svc_test_001"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep GUPAY_* variables from the host out of the tests."""
    for name in ("GUPAY_API_KEY", "GUPAY_SERVICE_ID", "GUPAY_BASE_URL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def config():
    return GUPayConfig(api_key=API_KEY, service_id=SERVICE_ID)


@pytest.fixture
def provider():
    return MockGUPayProvider(failure_rate=0.0, latency_ms=0)


@pytest_asyncio.fixture
async def client(config, provider):
    """Client wired to the mock provider."""
    async with GUPayClient(config, transport=provider.transport()) as c:
        yield c


@pytest.fixture
def charge_fields():
    """Request fields shared by every payment method."""
    return {
        "amount": 250.0,
        "currency": "THB",
        "description": "Gold membership",
        "reference_id": "order-1001",
        "customer_id": "somchai@example.com",
        "flow": "redirect",
        "return_url": "https://shop.example.com/return",
    }
