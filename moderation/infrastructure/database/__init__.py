"""Async SQLAlchemy session setup and the moderated repository."""

from moderation.infrastructure.database.repository import ModeratedRepository
from moderation.infrastructure.database.session import (
    Base,
    create_engine_from_settings,
    create_session_factory,
    get_db,
)

__all__ = [
    "Base",
    "ModeratedRepository",
    "create_engine_from_settings",
    "create_session_factory",
    "get_db",
]
