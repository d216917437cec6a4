"""
Shared pytest fixtures.

Each test gets its own application and therefore its own empty store.
"""
import os

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Settings are read at import time
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ["APP_DOMAIN"] = ""

from ephemeral_paste.main import create_app  # noqa: E402
from ephemeral_paste.store import PasteStore  # noqa: E402


@pytest.fixture
def store():
    """A fresh, empty paste store."""
    return PasteStore()


@pytest.fixture
def app(store):
    """Application wired to the `store` fixture, sweeper disabled."""
    return create_app(store=store, sweep_interval=0)


@pytest_asyncio.fixture
async def test_client(app):
    """
    HTTPX AsyncClient talking to the app in-process.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/api/healthz")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
