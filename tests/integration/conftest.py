"""Integration test fixtures for database and HTTP client operations.

Every test gets a fresh in-memory SQLite database (aiosqlite) behind the
application's own engine singleton, so requests and fixtures share data.
Uses polyfactory for type-safe test data generation.
"""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession
from sqlmodel import SQLModel

from src.lovgol.core import db
from src.lovgol.core import redis as redis_core
from src.lovgol.main import create_app
from src.lovgol.models import Admin
from tests.factories import DEFAULT_TEST_PASSWORD, AdminFactory


@pytest.fixture(autouse=True)
async def _reset_redis_between_tests() -> AsyncGenerator[None]:
    """Redis clients hold a reference to their event loop; close them per test."""
    redis_core.reset_redis_state()
    yield
    await redis_core.close_redis()


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine]:
    """Fresh schema on the application engine."""
    await db.dispose_engine()
    test_engine = db.get_engine()
    async with test_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield test_engine

    async with test_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await db.dispose_engine()


@pytest.fixture
async def db_session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Session on the test engine. Tests must commit explicitly."""
    async with AsyncSession(engine, expire_on_commit=False) as session:
        yield session


@pytest.fixture
async def client(engine: AsyncEngine) -> AsyncGenerator[AsyncClient]:
    """Anonymous HTTP client against the ASGI app."""
    app = create_app()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def test_admin(db_session: AsyncSession) -> Admin:
    """Stored admin whose password is DEFAULT_TEST_PASSWORD."""
    admin = AdminFactory.build()
    db_session.add(admin)
    await db_session.commit()
    return admin


@pytest.fixture
async def admin_client(client: AsyncClient, test_admin: Admin) -> AsyncClient:
    """HTTP client holding a live admin session cookie."""
    response = await client.post(
        "/api/login",
        json={"username": test_admin.username, "password": DEFAULT_TEST_PASSWORD},
    )
    assert response.status_code == 200, response.text
    return client
