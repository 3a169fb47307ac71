"""Async SQLAlchemy engine and session management."""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from msc_admin.core.config import DatabaseSettings, get_settings
from msc_admin.infrastructure.database.base import Base

logger = logging.getLogger(__name__)

_engine: AsyncEngine | None = None
AsyncSessionFactory: async_sessionmaker[AsyncSession] | None = None


def engine_options(database: DatabaseSettings, *, echo: bool = False) -> dict[str, Any]:
    """Driver specific engine arguments for the configured database URL."""
    url = make_url(database.url)
    options: dict[str, Any] = {"echo": database.echo or echo}

    if url.get_backend_name() == "sqlite":
        if url.database in (None, "", ":memory:"):
            # One shared connection, otherwise every session sees an empty database.
            options["poolclass"] = StaticPool
        return options

    options["pool_pre_ping"] = True
    if database.pool_size is not None:
        options["pool_size"] = database.pool_size
    if database.max_overflow is not None:
        options["max_overflow"] = database.max_overflow
    if url.get_driver_name() == "asyncpg":
        # The Supabase pooler runs in transaction mode and cannot keep prepared statements.
        options["connect_args"] = {"statement_cache_size": 0}
    return options


def get_engine() -> AsyncEngine:
    global _engine, AsyncSessionFactory
    if _engine is None:
        settings = get_settings()
        _engine = create_async_engine(
            settings.database_url,
            **engine_options(settings.database, echo=settings.debug),
        )
        AsyncSessionFactory = async_sessionmaker(
            bind=_engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        logger.debug("Database engine created for %s", _engine.url.render_as_string(hide_password=True))
    return _engine


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """Request scoped session: committed on success, rolled back on any error."""
    get_engine()
    assert AsyncSessionFactory is not None
    async with AsyncSessionFactory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def init_db() -> None:
    """Create the content tables when running against a local database."""
    # Imported late so every model is registered on Base.metadata.
    from msc_admin.db import models  # noqa: F401

    engine = get_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_engine() -> None:
    global _engine, AsyncSessionFactory
    if _engine is not None:
        await _engine.dispose()
        _engine = None
        AsyncSessionFactory = None
