"""Root conftest - shared database, store and API client fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db overridden to hand out sessions on the test engine
    - get_settings overridden so self-links use http://test

Design Decisions:
    - SQLite in-memory via aiosqlite: no external service needed; the entity
      table uses only portable column types
    - StaticPool: all sessions share the single in-memory connection
"""

import os

# Keep tests away from any real database configured in the environment
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)
from sqlalchemy.pool import StaticPool

import harbor.infrastructure.database as db_module
from harbor.config import Settings, get_settings
from harbor.core.projection import ResponseProjector
from harbor.db.base import Base
from harbor.infrastructure.database import DatabaseSessionManager, get_db
from harbor.infrastructure.entity_store import SqlEntityStore
from harbor.main import app
import harbor.models  # noqa: F401

BASE_URL = "http://test"


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def store(test_db) -> SqlEntityStore:
    return SqlEntityStore(test_db)


@pytest.fixture
def projector() -> ResponseProjector:
    return ResponseProjector(BASE_URL)


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB and settings dependencies overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_settings] = lambda: Settings(app_url=BASE_URL)

    # Readiness probe reads db_manager directly
    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url=BASE_URL,
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager
