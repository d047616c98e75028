import pytest
import pytest_asyncio
from decimal import Decimal
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

import supplier_api.domain  # noqa: F401
from supplier_api.db.base import Base, get_db
from supplier_api.domain.supplier import Supplier
from supplier_api.main import app


@pytest_asyncio.fixture
async def engine(tmp_path):
    """A fresh SQLite database file per test, with tables created from metadata"""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'suppliers_test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest_asyncio.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(session_factory):
    """HTTP client against the app with get_db pointed at the test database"""
    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def make_supplier(session_factory):
    """Insert a supplier row directly and return it"""
    async def _make(name="Global Supplies Inc", **fields):
        async with session_factory() as session:
            supplier = Supplier(name=name, **fields)
            session.add(supplier)
            await session.commit()
            await session.refresh(supplier)
            return supplier

    return _make


@pytest_asyncio.fixture
async def catalog(make_supplier):
    """A small mixed set of suppliers for search tests"""
    return [
        await make_supplier("Acme Corp", country="US", annual_billing_usd=Decimal("1500.50")),
        await make_supplier("Acme Europe", country="DE", annual_billing_usd=Decimal("900.00")),
        await make_supplier("Globex", country="US", annual_billing_usd=Decimal("25000.00")),
        await make_supplier("Initech", country="USA"),
    ]
