"""
Scatter-Brain Backend — Test Configuration (conftest.py)
=========================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── store: Empty InMemoryThoughtStore
    ├── service: ThoughtService over that store
    ├── app: FastAPI app serving that store
    ├── test_client: HTTPX AsyncClient bound to the app
    └── sample_post: ThoughtPost body as a client would send it
"""

import os
import tempfile
from pathlib import Path

# Environment must be set before any scatterbrain import reads settings.
_static_root = Path(tempfile.mkdtemp(prefix="scatterbrain_test_"))
(_static_root / "index.html").write_text("<h1>scatter-brain</h1>", encoding="utf-8")
os.environ["STATIC_ROOT"] = str(_static_root)
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from scatterbrain.main import create_app
from scatterbrain.services.thought_service import ThoughtService
from scatterbrain.store import InMemoryThoughtStore


@pytest.fixture
def static_root() -> Path:
    """Directory served by the static fallback, pre-seeded with index.html."""
    return _static_root


@pytest.fixture
def store():
    return InMemoryThoughtStore()


@pytest.fixture
def service(store):
    return ThoughtService(store)


@pytest.fixture
def app(store):
    return create_app(store=store)


@pytest.fixture
def sample_post():
    """Creation body in wire format (note `Thought`, not `Content`)."""
    return {"Title": "t1", "Thought": "c1"}


@pytest_asyncio.fixture
async def test_client(app):
    """
    Provides an async HTTP test client for endpoint testing.

    Uses ASGITransport to route requests directly to the app; no server runs
    and the lifespan handler is not invoked.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
