"""
RouteDemo Backend — Test Configuration (conftest.py)
=====================================================

What:  Shared pytest fixtures for the entire test suite.
Why:   Provides reusable test infrastructure (settings, apps, HTTP clients).
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── storage_dir: Fresh temporary storage directory
    ├── settings / debug_settings: Settings pointing at storage_dir
    ├── app / debug_app: Apps built by create_app() with debug off / on
    ├── test_client: HTTPX AsyncClient for the debug-off app
    └── debug_client: HTTPX AsyncClient for the debug-on app
"""

import os
import tempfile

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport


# ══════════════════════════════════════════════════════════════════════════
# Environment Setup
# ══════════════════════════════════════════════════════════════════════════

# Override settings for testing BEFORE any app imports
# Why: routedemo.main builds its module-level app (and storage dir) on import
os.environ["STORAGE_ROOT"] = tempfile.mkdtemp(prefix="routedemo_test_")
os.environ["LOG_LEVEL"] = "WARNING"  # Reduce noise during tests
os.environ.pop("DEBUG", None)


from routedemo.config import Settings  # noqa: E402
from routedemo.main import create_app  # noqa: E402


# ══════════════════════════════════════════════════════════════════════════
# Function-Scoped Fixtures (created fresh for each test)
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def storage_dir(tmp_path):
    """A fresh storage directory for each test (cleaned up by pytest)."""
    path = tmp_path / "files"
    path.mkdir()
    return path


@pytest.fixture
def settings(storage_dir):
    return Settings(debug=False, storage_root=str(storage_dir))


@pytest.fixture
def debug_settings(storage_dir):
    return Settings(debug=True, storage_root=str(storage_dir))


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def debug_app(debug_settings):
    return create_app(debug_settings)


@pytest_asyncio.fixture
async def test_client(app):
    """
    Provides an async HTTP test client for endpoint testing.

    What:    HTTPX AsyncClient configured to talk to a debug-off app.
    How:     Uses ASGITransport to route requests directly to the app.
             raise_app_exceptions=False lets tests observe the 500 page
             rendered for an uncaught exception instead of the exception.
    """
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def debug_client(debug_app):
    """Same as test_client, for an app built with debug=True."""
    transport = ASGITransport(app=debug_app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
