"""Fixtures for moderation unit tests: in-memory SQLite engine and async sessions."""

import pytest
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from moderation.infrastructure.database.session import create_session_factory
from tests.unit.moderated_models import Base, clock


@pytest.fixture(autouse=True)
def reset_clock():
    clock.reset()
    yield clock
    clock.reset()


@pytest.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return create_session_factory(engine)


@pytest.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session
