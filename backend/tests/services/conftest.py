"""Service test fixtures - async DB, FastAPI test client, in-memory repository.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test DB session
    - db_manager patched so the readiness probe sees the test engine
    - InMemoryPlayerRepository satisfies core PlayerRepository without a database
"""

import itertools

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool
from httpx import ASGITransport, AsyncClient

from app.db.base import Base
from app.infrastructure.database import get_db, DatabaseSessionManager
import app.infrastructure.database as db_module
from app.main import app  # also registers every model on Base.metadata
from app.services.player_service import PlayerService


class InMemoryPlayerRepository:
    """Dict-backed PlayerRepository that records save calls."""

    def __init__(self):
        self.players = {}
        self.save_calls = 0
        self._ids = itertools.count(1)

    async def find_all(self):
        return [self.players[k] for k in sorted(self.players)]

    async def find_by_id(self, player_id):
        return self.players.get(player_id)

    async def save(self, player):
        if player.id is None:
            player.id = next(self._ids)
        self.players[player.id] = player
        self.save_calls += 1
        return player

    async def delete(self, player):
        del self.players[player.id]


@pytest.fixture
def repository():
    return InMemoryPlayerRepository()


@pytest.fixture
def service(repository):
    return PlayerService(repository)


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
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager
