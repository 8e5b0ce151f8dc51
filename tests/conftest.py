"""
Zwanski API: Test Configuration (conftest.py)
==============================================

What:  Shared pytest fixtures for the test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixtures:
    ├── test_client:   HTTPX AsyncClient wired straight to the ASGI app
    ├── edge_headers:  Cloudflare headers as the edge would send them
    └── upstream:      UpstreamService with a short timeout, for service tests

Outbound HTTP is never real: tests that reach /api/ping or /api/crypto use
respx's `respx_mock` fixture, which intercepts httpx at the transport layer.
The ASGITransport used by test_client bypasses that layer, so the two do not
interfere.
"""

import os

# Override settings for testing BEFORE any app imports
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["ENABLE_DOCS"] = "false"

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from zwanski_api.services.upstream import UpstreamService


@pytest_asyncio.fixture
async def test_client():
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_quote(test_client):
            response = await test_client.get("/api/quote")
            assert response.status_code == 200
    """
    from zwanski_api.main import app
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def edge_headers():
    """Headers Cloudflare adds in front of the worker."""
    return {
        "CF-Connecting-IP": "203.0.113.42",
        "CF-IPCountry": "TN",
        "CF-Metro-Code": "TUN",
        "CF-IPLatitude": "36.8065",
        "CF-IPLongitude": "10.1815",
        "CF-Ray": "8f1a2b3c4d5e6f70-LHR",
        "User-Agent": "Mozilla/5.0 (X11; Linux x86_64) Firefox/128.0",
    }


@pytest.fixture
def upstream():
    return UpstreamService(timeout=1.0, ping_scheme="https")
