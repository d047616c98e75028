import pytest
from sqlalchemy import text
from sqlalchemy.ext.asyncio import create_async_engine

from supplier_api.core.exceptions import SchemaMismatchError
from supplier_api.db.schema import check_connection, verify_schema


@pytest.mark.asyncio
async def test_verify_schema_passes_on_migrated_table(engine):
    await verify_schema(engine)


@pytest.mark.asyncio
async def test_verify_schema_missing_table(tmp_path):
    empty = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'empty.db'}")
    try:
        with pytest.raises(SchemaMismatchError) as exc_info:
            await verify_schema(empty)
        assert exc_info.value.missing == []
        assert "does not exist" in str(exc_info.value)
    finally:
        await empty.dispose()


@pytest.mark.asyncio
async def test_verify_schema_reports_missing_columns(tmp_path):
    partial = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'partial.db'}")
    async with partial.begin() as conn:
        await conn.execute(
            text(
                "CREATE TABLE Suppliers ("
                "Id INTEGER PRIMARY KEY, Name VARCHAR(200) NOT NULL, CreatedAt DATETIME NOT NULL)"
            )
        )
    try:
        with pytest.raises(SchemaMismatchError) as exc_info:
            await verify_schema(partial)
        assert "Email" in exc_info.value.missing
        assert "AnnualBillingUSD" in exc_info.value.missing
        assert "Name" not in exc_info.value.missing
    finally:
        await partial.dispose()


@pytest.mark.asyncio
async def test_check_connection(engine):
    assert await check_connection(engine) is True
