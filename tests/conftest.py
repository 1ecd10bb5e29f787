"""Pytest configuration and fixtures for realm-admin.

Uses realm_admin.main:app for HTTP tests and
realm_admin.infrastructure.persistence.database for DB-dependent fixtures.
"""

import os

# Settings require SECRET_KEY; set before the app (and get_settings) is imported.
os.environ.setdefault("SECRET_KEY", "test-secret-key-not-for-production")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

import realm_admin.infrastructure.persistence.database as database
from realm_admin.main import app


@pytest.fixture
async def client() -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def override():
    """Set app.dependency_overrides for one test; cleared afterwards."""
    yield app.dependency_overrides
    app.dependency_overrides.clear()


@pytest.fixture
async def db_session() -> AsyncSession:
    """Database session for repository/integration tests. Rolls back after test.

    Requires DATABASE_URL (postgresql+asyncpg) and a migrated schema. Skips
    when Postgres is not configured; run without DB via:
    pytest -m 'not requires_db'.
    """
    database._ensure_engine()
    if database.AsyncSessionLocal is None:
        pytest.skip(
            "Postgres not configured: set DATABASE_URL, then run: alembic upgrade head"
        )
    async with database.AsyncSessionLocal() as session:
        yield session
        await session.rollback()
    await database.dispose_engine()


@pytest.fixture
async def session_factory():
    """Session factory for tests that commit through their own transactions.

    Same skip rule as db_session. The engine is disposed afterwards so each
    test's event loop gets fresh connections.
    """
    database._ensure_engine()
    if database.AsyncSessionLocal is None:
        pytest.skip(
            "Postgres not configured: set DATABASE_URL, then run: alembic upgrade head"
        )
    yield database.AsyncSessionLocal
    await database.dispose_engine()
