"""Service test fixtures — async DB, fake identity provider, mocked catalog, FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db_manager overridden so routes run through the real DatabaseSessionManager
    - Identity verification is faked: "<name>-token" verifies as subject "<name>"
    - The real CatalogClient is used over httpx.MockTransport, so query translation is
      exercised end to end and every outbound request is recorded

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
    - seed() writes through its own session so routes never see test-side identity maps
"""

import httpx
import pytest
from sqlalchemy.pool import StaticPool
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from app.api.dependencies import get_catalog, get_db_manager, get_identity_verifier
from app.db.base import Base
from app.infrastructure.catalog_client import CatalogClient
from app.infrastructure.database import DatabaseSessionManager
from app.main import app
from tests.services.helpers import CatalogStub, FakeIdentityVerifier


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
def seed(test_session_factory):
    """Persist ORM objects and return them (ids populated)."""
    async def _seed(*records):
        async with test_session_factory() as session:
            session.add_all(records)
            await session.commit()
        return records if len(records) > 1 else records[0]
    return _seed


@pytest.fixture
def fetch(test_session_factory):
    """Load one row by primary key in a fresh session (None when absent)."""
    async def _fetch(model, key):
        async with test_session_factory() as session:
            return await session.get(model, key)
    return _fetch


@pytest.fixture
def identity():
    return FakeIdentityVerifier()


@pytest.fixture
def catalog_stub():
    return CatalogStub()


@pytest.fixture
async def client(test_engine, identity, catalog_stub):
    """FastAPI test client with every external collaborator overridden."""
    manager = DatabaseSessionManager.from_engine(test_engine)
    catalog = CatalogClient(
        api_key="tmdb-test-key",
        base_url="https://catalog.test/3",
        default_language="en-US",
        transport=httpx.MockTransport(catalog_stub.handler),
    )

    app.dependency_overrides[get_db_manager] = lambda: manager
    app.dependency_overrides[get_identity_verifier] = lambda: identity
    app.dependency_overrides[get_catalog] = lambda: catalog

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    await catalog.aclose()
