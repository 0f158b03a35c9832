"""
IdeaBoard Backend: Database Connection Pool & Sessions
========================================================

What:  The `Database` resource (async engine + bounded connection pool), the
       declarative `Base` for ORM models, and the per-request session dependency.
How:   The app factory builds one `Database` from settings and stores it on
       `app.state.database`. Each request checks out exactly one pooled
       connection, binds an `AsyncSession` to it, and returns the connection
       to the pool when the handler finishes, whether it succeeded or raised.
When:  Engine created at startup (lifespan); disposed at shutdown.

Connection Pooling:
    pool_size / max_overflow: upper bound on concurrent connections
    pool_timeout:             how long a request waits for a free connection;
                              past it the request fails with PoolExhaustedError
    pool_pre_ping:            validates connections before use
    pool_recycle=3600:        recycles connections every hour
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, AsyncIterator, Optional

from fastapi import Request
from sqlalchemy import exc as sa_exc
from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import AsyncAdaptedQueuePool

from ideaboard.config import Settings
from ideaboard.exceptions import DatabaseError, PoolExhaustedError

logger = logging.getLogger(__name__)


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Shares a single metadata object, which Alembic reads for migrations.
    """
    pass


class Database:
    """
    Owns the async engine and its connection pool.

    One instance per process. It is passed to request handlers through
    `get_db_session` rather than imported as a module global, so tests can
    build their own against a throwaway database.
    """

    def __init__(
        self,
        url: str,
        pool_size: int = 10,
        max_overflow: int = 5,
        pool_timeout: float = 5.0,
        pool_pre_ping: bool = True,
        echo: bool = False,
    ):
        self.url = url
        self.pool_timeout = pool_timeout
        self.engine: AsyncEngine = create_async_engine(
            url,
            poolclass=AsyncAdaptedQueuePool,
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_timeout=pool_timeout,
            pool_pre_ping=pool_pre_ping,
            pool_recycle=3600,
            echo=echo,
        )
        # expire_on_commit=False: returned ORM objects stay readable after commit
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        """Builds the process-wide pool from application settings."""
        return cls(
            settings.database_url,
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_timeout=settings.db_pool_timeout,
            pool_pre_ping=settings.db_pool_pre_ping,
            # SQL logging is only useful during development
            echo=settings.log_level == "DEBUG",
        )

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """
        Scoped acquisition of one pooled connection wrapped in a session.

        The connection is checked out up front so that an exhausted pool fails
        the request immediately instead of midway through its statements.
        Repositories commit their own writes; anything left uncommitted when
        the block exits is rolled back.

        Raises:
            PoolExhaustedError: no connection became free within pool_timeout
            DatabaseError: the connection itself could not be opened
        """
        try:
            connection = await self.engine.connect()
        except sa_exc.TimeoutError as exc:
            logger.error(
                "Connection pool exhausted after %.1fs: %s", self.pool_timeout, exc
            )
            raise PoolExhaustedError(timeout=self.pool_timeout) from exc
        except sa_exc.SQLAlchemyError as exc:
            logger.error("Could not connect to the database: %s", exc)
            raise DatabaseError(
                context={"operation": "connect", "error_type": type(exc).__name__}
            ) from exc

        try:
            async with self.session_factory(bind=connection) as session:
                try:
                    yield session
                except Exception:
                    await session.rollback()
                    raise
        finally:
            # Returns the connection to the pool on every exit path
            await connection.close()

    async def ping(self) -> None:
        """Runs SELECT 1 through the pool. Raises on any connectivity problem."""
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    async def create_all(self) -> None:
        """Creates the ideas and likes tables (tests and local development)."""
        import ideaboard.models  # noqa: F401  (registers the tables on Base.metadata)

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        """Closes every pooled connection. Called during application shutdown."""
        await self.engine.dispose()


# ── Session Dependency ────────────────────────────────────────────────────
def get_database(request: Request) -> Database:
    """Returns the Database the running application was built with."""
    database: Optional[Database] = getattr(request.app.state, "database", None)
    if database is None:
        raise RuntimeError("Application database has not been initialised")
    return database


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    Example usage in a route:
        @router.get("/ideas")
        async def list_ideas(db: AsyncSession = Depends(get_db_session)):
            ...

    Raises:
        PoolExhaustedError: handled globally as a 500 pool_exhausted response
        DatabaseError: handled globally as a 500 server_error response
    """
    async with get_database(request).session() as session:
        yield session
