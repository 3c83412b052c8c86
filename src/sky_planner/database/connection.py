"""Database connection management.

Provides async database connection using SQLAlchemy.

## Configuration

Database connection is configured via environment variables:
- DATABASE_URL: Async connection string. SQLite (aiosqlite) by default;
  PostgreSQL (asyncpg) is supported with the `postgres` extra.
- DATABASE_ECHO: Log SQL statements
- CREATE_TABLES_ON_STARTUP: Create missing tables when the API starts

## Usage

```python
from sky_planner.database import get_db, init_db

# Initialize on startup
await init_db()

# Use in request handlers
async with get_db() as session:
    record = await session.get(EventRecord, event_id)
```
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from sky_planner.config import get_settings
from sky_planner.database.models import Base

logger = logging.getLogger(__name__)

# Global engine and session factory
_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None


async def init_db(database_url: str | None = None) -> None:
    """Initialize the database connection.

    Creates the async engine and session factory. Should be called
    once on application startup.

    Args:
        database_url: Override the configured DATABASE_URL
    """
    global _engine, _session_factory

    settings = get_settings()
    url = database_url or settings.database_url

    logger.info("Initializing database connection")

    engine_kwargs: dict[str, Any] = {"echo": settings.database_echo}
    if not url.startswith("sqlite"):
        engine_kwargs["pool_pre_ping"] = True  # Verify connections before use
    elif ":memory:" in url:
        # One shared connection, or every session sees an empty database
        engine_kwargs["poolclass"] = StaticPool

    _engine = create_async_engine(url, **engine_kwargs)

    _session_factory = async_sessionmaker(
        _engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )

    logger.info("Database connection initialized")


async def close_db() -> None:
    """Close the database connection.

    Should be called on application shutdown.
    """
    global _engine, _session_factory

    if _engine:
        logger.info("Closing database connection")
        await _engine.dispose()
        _engine = None
        _session_factory = None


async def create_tables() -> None:
    """Create all database tables that do not exist yet."""
    if _engine is None:
        raise RuntimeError("Database not initialized. Call init_db() first.")

    async with _engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info("Database tables created")


@asynccontextmanager
async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Get a database session.

    Use as an async context manager:
    ```python
    async with get_db() as session:
        # Use session
        await session.commit()
    ```

    The session is automatically closed when the context exits.
    Transactions are not automatically committed - call commit() explicitly.
    """
    if _session_factory is None:
        raise RuntimeError("Database not initialized. Call init_db() first.")

    session = _session_factory()
    try:
        yield session
    except Exception:
        await session.rollback()
        raise
    finally:
        await session.close()


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    async with get_db() as session:
        yield session
