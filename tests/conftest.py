"""
Shared test fixtures for the Gestor Fincas API test suite.

Every test gets its own in-memory aiosqlite database.
"""

import os
import sys
from typing import AsyncGenerator

import pytest

# Ensure project root is importable
ROOT_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

# Override environment BEFORE importing application modules
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["CORS_ORIGINS"] = '["*"]'

from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from gestor_fincas.api.deps import get_db
from gestor_fincas.core.security import JwtAuthenticationService
from gestor_fincas.db.base import Base
from gestor_fincas.db.init_db import seed_database
from gestor_fincas.db.session import build_engine, build_session_factory
from gestor_fincas.main import app


@pytest.fixture
async def test_engine():
    """Fresh in-memory database with all tables created."""
    engine = build_engine("sqlite+aiosqlite:///:memory:")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(test_engine) -> async_sessionmaker[AsyncSession]:
    return build_session_factory(test_engine)


@pytest.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Return a raw database session for direct queries in tests."""
    async with session_factory() as session:
        yield session


@pytest.fixture
async def seeded_db(session_factory) -> None:
    """Seed the default admin (admin / admin123) and the first probe row."""
    async with session_factory() as session:
        await seed_database(session)


@pytest.fixture
async def async_client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    """Return a httpx AsyncClient wired to the app and the test database."""

    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = _override_get_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def auth_service() -> JwtAuthenticationService:
    return JwtAuthenticationService(secret="test-secret")
