"""
IdeaBoard Backend: Test Configuration (conftest.py)
=====================================================

Shared pytest fixtures for the test suite.

Fixture Hierarchy (all function-scoped):
    ├── database:        Database pool on a throwaway SQLite file (tables created)
    ├── db_session:      One pooled session from `database`
    ├── mock_db_session: AsyncMock session for failure-path tests (no DB needed)
    └── test_client:     HTTPX AsyncClient talking to an app built on `database`
"""

import os

# Override settings BEFORE any ideaboard import reads them. The URL only keeps
# the module-level `settings` off PostgreSQL; fixtures build their own Database
# in tmp_path and never open this one.
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["LOG_LEVEL"] = "WARNING"

from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event

from ideaboard.database import Database


@pytest.fixture
def sqlite_database_url(tmp_path) -> str:
    """URL of a SQLite file unique to the current test."""
    return f"sqlite+aiosqlite:///{tmp_path / 'ideaboard_test.db'}"


@pytest_asyncio.fixture
async def database(sqlite_database_url):
    """
    A real Database (engine + bounded pool) backed by a fresh SQLite file.

    The file lives in pytest's tmp_path, so every test starts empty. SQLite
    leaves foreign keys unenforced unless asked, so every pooled connection
    turns them on, matching PostgreSQL (ON DELETE CASCADE included).
    """
    db = Database(
        sqlite_database_url,
        pool_size=5,
        max_overflow=0,
        pool_timeout=2.0,
        pool_pre_ping=False,
    )

    @event.listens_for(db.engine.sync_engine, "connect")
    def enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    await db.create_all()
    yield db
    await db.dispose()


@pytest_asyncio.fixture
async def db_session(database):
    """A session bound to one pooled connection, as a request would get."""
    async with database.session() as session:
        yield session


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        mock_db_session.execute.side_effect = OperationalError("SELECT", {}, Exception())
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest_asyncio.fixture
async def test_client(database):
    """
    HTTPX AsyncClient routed straight into a fresh app instance.

    ASGITransport does not run the lifespan, so the app is handed the test
    database directly.
    """
    from ideaboard.main import create_app

    app = create_app(database=database)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
