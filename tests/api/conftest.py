"""API test fixtures: in-memory SQLite + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test engine
    - Apps built through create_app(Settings(...)) so each test picks its
      own secret/CORS configuration

Design Decisions:
    - StaticPool: one shared connection keeps the :memory: database alive
      across sessions
    - make_client(raise_app_exceptions=False) for catch-all 500 tests, since
      Starlette re-raises after the handler responds
"""

from contextlib import asynccontextmanager

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)
from sqlalchemy.pool import StaticPool

from model_service.config import Settings
from model_service.db.base import Base
from model_service.infrastructure.database import get_db
from model_service.main import create_app
import model_service.models  # noqa: F401


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
def make_client(test_session_factory):
    """Build an AsyncClient for an app created from the given settings."""

    @asynccontextmanager
    async def _make(settings: Settings | None = None, raise_app_exceptions=True):
        app = create_app(settings or Settings(api_key=""))

        async def override_get_db():
            async with test_session_factory() as session:
                yield session

        app.dependency_overrides[get_db] = override_get_db
        transport = ASGITransport(
            app=app, raise_app_exceptions=raise_app_exceptions,
        )
        async with AsyncClient(transport=transport, base_url="http://test") as c:
            c.app = app
            yield c
        app.dependency_overrides.clear()

    return _make


@pytest.fixture
async def client(make_client):
    async with make_client() as c:
        yield c


@pytest.fixture
async def seeded_client(client):
    for model_id, name in ((1, "alpha"), (2, "charlie"), (3, "bravo")):
        res = await client.post("/model", json={"id": model_id, "name": name})
        assert res.status_code == 201
    return client
