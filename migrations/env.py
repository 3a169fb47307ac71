"""Alembic environment for the local mirror of the content tables."""

from __future__ import annotations

import asyncio
from logging.config import fileConfig

from alembic import context
from sqlalchemy.engine import Connection

from msc_admin.core.config import get_settings
from msc_admin.db import models  # noqa: F401
from msc_admin.infrastructure.database.base import Base
from msc_admin.infrastructure.database.session import get_engine

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata

# Offline mode renders SQL only, so the async drivers are swapped for their sync dialects.
_SYNC_DIALECTS = {
    "sqlite+aiosqlite": "sqlite",
    "postgresql+asyncpg": "postgresql",
}


def _offline_url() -> str:
    url = get_settings().database_url
    scheme, sep, rest = url.partition("://")
    return _SYNC_DIALECTS.get(scheme, scheme) + sep + rest


def _configure(**kwargs) -> None:
    url = get_settings().database_url
    context.configure(
        target_metadata=target_metadata,
        compare_type=True,
        # SQLite cannot ALTER most columns in place.
        render_as_batch=url.startswith("sqlite"),
        **kwargs,
    )


def run_migrations_offline() -> None:
    _configure(url=_offline_url(), literal_binds=True, dialect_opts={"paramstyle": "named"})
    with context.begin_transaction():
        context.run_migrations()


def _run_with_connection(connection: Connection) -> None:
    _configure(connection=connection)
    with context.begin_transaction():
        context.run_migrations()


async def run_migrations_online() -> None:
    async with get_engine().connect() as connection:
        await connection.run_sync(_run_with_connection)


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_migrations_online())
