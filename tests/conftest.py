"""
Chirpy Backend — Test Configuration (conftest.py)
==================================================

What:  Shared pytest fixtures for the entire test suite.
How:   Environment variables are set BEFORE any chirpy import, because the
       settings singleton and the database engine are built at import time.

Fixture Hierarchy (all function-scoped):
    ├── mock_db_session: AsyncMock session (no real DB needed)
    ├── static_root:     temp directory served under /app/
    ├── make_settings:   builds Settings with per-test overrides
    ├── db_tables:       creates/drops tables in the SQLite test database
    ├── dev_app:         app created with PLATFORM=dev and real tables
    └── test_client:     HTTPX AsyncClient bound to dev_app
"""

import os
import tempfile
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# ══════════════════════════════════════════════════════════════════════════
# Environment Setup
# ══════════════════════════════════════════════════════════════════════════

_test_dir = tempfile.mkdtemp(prefix="chirpy_test_")
os.environ["DB_URL"] = f"sqlite+aiosqlite:///{_test_dir}/chirpy_test.db"
os.environ["PLATFORM"] = ""
os.environ["FILEPATH_ROOT"] = _test_dir
os.environ["LOG_LEVEL"] = "WARNING"

from chirpy.config import Settings  # noqa: E402
from chirpy.database import Base, engine  # noqa: E402
from chirpy.main import create_app  # noqa: E402
from chirpy.models.user import User  # noqa: E402,F401


# ══════════════════════════════════════════════════════════════════════════
# Function-Scoped Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        mock_db_session.flush.side_effect = SQLAlchemyError("boom")
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def static_root(tmp_path):
    """A static site with an index page, served under /app/."""
    root = tmp_path / "static"
    root.mkdir()
    (root / "index.html").write_text("<html><body>Welcome to Chirpy</body></html>")
    return str(root)


@pytest.fixture
def make_settings(static_root):
    """
    Builds Settings for a test app. Defaults to a dev deployment.

    Usage:
        prod_settings = make_settings(platform="production")
    """
    def _make(**overrides) -> Settings:
        values = {"platform": "dev", "filepath_root": static_root}
        values.update(overrides)
        return Settings(**values)

    return _make


@pytest_asyncio.fixture
async def db_tables():
    """Fresh tables in the SQLite test database for each test."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest.fixture
def dev_app(make_settings, db_tables):
    return create_app(make_settings())


@pytest_asyncio.fixture
async def test_client(dev_app):
    """
    HTTPX AsyncClient talking to dev_app through ASGITransport.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/api/healthz")
    """
    transport = ASGITransport(app=dev_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
