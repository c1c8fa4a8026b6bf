"""
Pytest configuration and fixtures.
Provides test app client and async DB session replacement.
"""

import os

# Rate limiting is process-wide; keep it out of the request count of the suite.
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

from app.main import app
from app.db.init_db import create_tables, drop_tables
from app.db.session import get_db


# Test database URL (in-memory SQLite for testing)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture(scope="function")
async def test_engine():
    """In-memory SQLite engine with every table created."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_tables(bind=engine)

    yield engine

    await drop_tables(engine)
    await engine.dispose()


@pytest.fixture(scope="function")
def test_session_maker(test_engine):
    return async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest.fixture(scope="function")
async def test_db_session(test_session_maker):
    """
    Create a test database session.
    Uses in-memory SQLite for fast tests.
    """
    async with test_session_maker() as session:
        yield session


@pytest.fixture(scope="function")
async def test_client(test_session_maker):
    """
    Create a test HTTP client bound to the test database.
    """
    async def override_get_db():
        async with test_session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.dependency_overrides.pop(get_db, None)


@pytest.fixture
def create_client(test_client):
    """Factory posting a client and returning its JSON body."""
    async def _create(**overrides):
        payload = {"company_name": "Acme Corp", "stage": "prospect"}
        payload.update(overrides)
        response = await test_client.post("/api/v1/clients", json=payload)
        assert response.status_code == 201, response.text
        return response.json()
    return _create


@pytest.fixture
def create_payment(test_client):
    """Factory posting a payment and returning its JSON body."""
    async def _create(client_id, amount="100.00", payment_date="2024-01-15", status="completed", **extra):
        payload = {
            "client_id": client_id,
            "amount": amount,
            "payment_date": payment_date,
            "status": status,
        }
        payload.update(extra)
        response = await test_client.post("/api/v1/payments", json=payload)
        assert response.status_code == 201, response.text
        return response.json()
    return _create


@pytest.fixture
def create_expense(test_client):
    """Factory posting an expense and returning its JSON body."""
    async def _create(client_id, amount="40.00", expense_date="2024-01-20", status="approved", **extra):
        payload = {
            "client_id": client_id,
            "amount": amount,
            "expense_date": expense_date,
            "status": status,
        }
        payload.update(extra)
        response = await test_client.post("/api/v1/expenses", json=payload)
        assert response.status_code == 201, response.text
        return response.json()
    return _create


@pytest.fixture
def create_budget(test_client):
    """Factory posting a budget and returning its JSON body."""
    async def _create(client_id, amount="1000.00", **extra):
        payload = {
            "client_id": client_id,
            "name": "Q1 campaign",
            "amount": amount,
            "period": "quarterly",
            "start_date": "2024-01-01",
            "end_date": "2024-03-31",
        }
        payload.update(extra)
        response = await test_client.post("/api/v1/budgets", json=payload)
        assert response.status_code == 201, response.text
        return response.json()
    return _create
