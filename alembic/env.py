"""Alembic async env for the Suppliers schema.

The database URL comes from ``DATABASE_URL`` (see supplier_api.core.config)
unless overridden on the command line: ``alembic -x dburl=... upgrade head``.
"""

from __future__ import annotations

import asyncio
from logging.config import fileConfig

from alembic import context
from sqlalchemy.ext.asyncio import create_async_engine

from supplier_api.core.config import settings
from supplier_api.db.base import Base

# Register the Supplier mapping on Base.metadata
import supplier_api.domain  # noqa: F401

config = context.config
if config.config_file_name:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def _database_url() -> str:
    return context.get_x_argument(as_dictionary=True).get("dburl", settings.database_url)


def _configure(**kwargs) -> None:
    context.configure(
        target_metadata=target_metadata,
        compare_type=True,  # catch column length / precision drift
        render_as_batch=True,  # required for SQLite ALTER support
        **kwargs,
    )


def run_migrations_offline() -> None:
    _configure(
        url=_database_url(),
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


async def run_migrations_online() -> None:
    engine = create_async_engine(_database_url())
    try:
        async with engine.connect() as connection:
            await connection.run_sync(lambda sync_conn: _configure(connection=sync_conn))
            async with connection.begin():
                await connection.run_sync(lambda _: context.run_migrations())
    finally:
        await engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_migrations_online())
