# moderation/infrastructure/database/session.py

from functools import lru_cache

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    create_async_engine,
    AsyncSession,
    async_sessionmaker,
)
from sqlalchemy.orm import declarative_base

from moderation.config.settings import get_settings

Base = declarative_base()


def create_engine_from_settings(database_url: str | None = None, **kwargs) -> AsyncEngine:
    url = database_url or get_settings().database_url
    return create_async_engine(url, echo=False, pool_pre_ping=True, **kwargs)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=engine,
        expire_on_commit=False,
        autoflush=False,
        class_=AsyncSession,
    )


@lru_cache
def get_session_factory() -> async_sessionmaker[AsyncSession]:
    return create_session_factory(create_engine_from_settings())


async def get_db() -> AsyncSession:
    async with get_session_factory()() as session:
        yield session
