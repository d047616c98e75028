"""Startup checks: database reachability and ORM-to-table column verification.

Creating or migrating tables is the store administrator's job (``alembic
upgrade head``). The application only confirms that every mapped column
exists and refuses to start otherwise.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from sqlalchemy import Table, inspect, text
from sqlalchemy.engine import Connection
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from supplier_api.core.exceptions import SchemaMismatchError
from supplier_api.domain.supplier import Supplier

logger = logging.getLogger(__name__)


async def check_connection(engine: AsyncEngine) -> bool:
    """Open one connection and run a trivial query. Logs, never raises."""
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.error("Could not connect to the database: %s", exc)
        return False
    logger.info("Successfully connected to database %r", engine.url.database)
    return True


def _missing_columns(sync_conn: Connection, table: Table) -> list[str] | None:
    """Return mapped columns absent from the live table, or None if the table is absent."""
    inspector = inspect(sync_conn)
    if not inspector.has_table(table.name, schema=table.schema):
        return None
    # SQL Server and SQLite compare identifiers case-insensitively
    present = {
        col["name"].lower()
        for col in inspector.get_columns(table.name, schema=table.schema)
    }
    return [col.name for col in table.columns if col.name.lower() not in present]


async def verify_schema(
    engine: AsyncEngine, tables: Iterable[Table] | None = None
) -> None:
    """Raise :class:`SchemaMismatchError` unless every mapped column exists."""
    tables = list(tables) if tables is not None else [Supplier.__table__]
    async with engine.connect() as conn:
        for table in tables:
            missing = await conn.run_sync(_missing_columns, table)
            if missing is None:
                raise SchemaMismatchError(table.name, [])
            if missing:
                raise SchemaMismatchError(table.name, missing)
            logger.debug("Table %s matches its mapping", table.name)
    logger.info("Schema verified for %d table(s)", len(tables))
