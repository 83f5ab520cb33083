"""
Inkpost Backend — Test Configuration (conftest.py)
====================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── mock_store: AsyncMock with the PostStore method set (no database)
    ├── sample_post: MagicMock shaped like a stored Post
    ├── db_session: real AsyncSession on a throwaway SQLite file
    └── test_client: HTTPX AsyncClient against the app, backed by SQLite
"""

import os
import tempfile
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# ══════════════════════════════════════════════════════════════════════════
# Environment Setup
# ══════════════════════════════════════════════════════════════════════════

# Must run before any `app` import: the engine is built from settings at import time
_TEST_DIR = tempfile.mkdtemp(prefix="inkpost_test_")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TEST_DIR}/test.db"
os.environ["LOG_LEVEL"] = "WARNING"


# ══════════════════════════════════════════════════════════════════════════
# Function-Scoped Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_store():
    """
    Provides a substitute PostStore.

    Usage:
        async def test_get(mock_store, sample_post):
            mock_store.find_by_id.return_value = sample_post
            result = await post_service.get_post(mock_store, str(sample_post.id))
    """
    store = AsyncMock()
    store.create = AsyncMock()
    store.find_many = AsyncMock(return_value=[])
    store.find_by_id = AsyncMock(return_value=None)
    store.update_by_id = AsyncMock(return_value=None)
    store.delete_by_id = AsyncMock(return_value=None)
    return store


@pytest.fixture
def sample_post():
    """A MagicMock with the attributes of a stored Post."""
    now = datetime.now(timezone.utc)
    post = MagicMock()
    post.id = uuid4()
    post.title = "My First Blog Post"
    post.content = "Hello world"
    post.category = "Technology"
    post.tags = ["Tech"]
    post.created_at = now
    post.updated_at = now
    return post


@pytest_asyncio.fixture
async def fresh_tables():
    """Creates the posts table before the test and drops it afterwards."""
    from app.database import Base, engine, init_models

    await init_models()
    yield
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    # Pooled connections belong to this test's event loop
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(fresh_tables):
    """A real AsyncSession on the SQLite test database."""
    from app.database import async_session_factory

    async with async_session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def test_client(fresh_tables):
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    from app.main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
