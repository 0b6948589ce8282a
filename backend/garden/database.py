"""
Community Garden Backend — Database Handle & Session Management
================================================================

What:  Async SQLAlchemy engine, session factory, and FastAPI session dependency.
Why:   Centralizes all database connection logic in one place.
How:   A `Database` object owns the engine (and therefore the connection pool)
       and the session factory. It is constructed by the application lifespan,
       stored on `app.state.database`, and disposed at shutdown.
Who:   Sessions are injected into route handlers via FastAPI's Depends().
When:  Engine lives for the process; sessions are created per-request.

Lifecycle:
    startup  → Database(settings) → create_schema() (if enabled)
    request  → get_db_session() yields an AsyncSession from the handle
    shutdown → dispose() closes every pooled connection
"""

import logging
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from garden.config import Settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    All models share this metadata, which `Database.create_schema()` uses
    to create missing tables.
    """
    pass


class Database:
    """
    Explicit handle over the async engine and its session factory.

    Attributes:
        engine:          AsyncEngine owning the connection pool
        session_factory: async_sessionmaker producing AsyncSession objects
    """

    def __init__(self, settings: Settings):
        engine_kwargs = {"echo": settings.db_echo}

        # SQLite picks its own pool class; QueuePool sizing args would be rejected
        if not settings.is_sqlite:
            engine_kwargs.update(
                pool_size=settings.db_pool_size,
                max_overflow=settings.db_max_overflow,
                pool_pre_ping=settings.db_pool_pre_ping,
                pool_recycle=3600,
            )

        self.engine: AsyncEngine = create_async_engine(settings.database_url, **engine_kwargs)

        # expire_on_commit=False: returned ORM objects stay readable after the
        # repository commits, including while templates render them
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    async def create_schema(self) -> None:
        """
        Create every table registered on Base.metadata that does not exist yet.

        Existing tables are left as they are; there is no migration support.
        """
        # Register all models with the metadata before create_all
        from garden.models import planting, plot, user  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database schema ensured: %s", ", ".join(sorted(Base.metadata.tables)))

    async def ping(self) -> bool:
        """Run SELECT 1; returns False instead of raising when the store is unreachable."""
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.warning("Database ping failed: %s", str(e))
            return False

    async def dispose(self) -> None:
        """Close all pooled connections. Called once at shutdown."""
        await self.engine.dispose()


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Creates a new session from the application's Database handle
        2. Yields it to the route handler
        3. On success: commits any remaining work
        4. On error: rolls back, then re-raises for the global handlers
        5. Always: closes the session (returns connection to pool)
    """
    database: Database = request.app.state.database
    async with database.session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
