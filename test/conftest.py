"""
Pytest configuration and fixtures for data cleaner tests
"""

import os
import sys

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))  # noqa: PTH100, PTH118, PTH119, PTH120

import datacleaner.models  # noqa: E402, F401
from datacleaner.database import Base, get_db  # noqa: E402
from datacleaner.plugins.loader import initialize_cleaners  # noqa: E402
from datacleaner.plugins.registry import CleanerRegistry  # noqa: E402
from datacleaner.routes.dependencies import get_registry  # noqa: E402

# SQLite in-memory database, one per test
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture(scope="function")
async def test_engine():
    """Create a fresh in-memory database with all tables."""
    engine = create_async_engine(TEST_DATABASE_URL, echo=False, poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture(scope="function")
async def session_factory(test_engine):
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture(scope="function")
async def db(session_factory):
    """Provide a database session for a test."""
    async with session_factory() as session:
        yield session


@pytest.fixture(scope="function")
def registry():
    """An empty cleaner registry."""
    return CleanerRegistry()


@pytest.fixture(scope="function")
def builtin_registry():
    """A registry holding the built-in cleaners."""
    reg = CleanerRegistry()
    initialize_cleaners(reg)
    return reg


@pytest.fixture(scope="function")
async def client(session_factory, builtin_registry):
    """HTTP client against the app with the test database and registry wired in."""
    from main import app

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_registry] = lambda: builtin_registry

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
