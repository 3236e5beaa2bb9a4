"""ORM mixins for moderated records. Status helpers, transitions and default columns."""

import logging
from functools import lru_cache
from typing import Optional

from sqlalchemy import Column, DateTime, Integer, String, event
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import declared_attr

from moderation.config.settings import get_settings
from moderation.domain.config import ModerationConfig
from moderation.domain.status import Status, StatusFilter
from moderation.scope.query import ModeratedQuery
from moderation.scope.status_filter import check_stamp_columns

logger = logging.getLogger(__name__)


@lru_cache
def default_config() -> ModerationConfig:
    """Process-wide config from ModerationSettings, for models without their own."""
    return ModerationConfig.from_settings(get_settings())


class ModeratableMixin:
    """
    Moderation behaviour for a mapped class that declares its own status,
    moderated_at and moderated_by attributes (names per ModerationConfig).
    Set __moderation_config__ on the class to override the process default.
    """

    __moderation_config__: Optional[ModerationConfig] = None

    @classmethod
    def moderation_config(cls) -> ModerationConfig:
        return cls.__moderation_config__ or default_config()

    # --- Predicates (in-memory, no I/O) ---

    def _status_value(self):
        return getattr(self, self.moderation_config().status_column)

    def is_pending(self) -> bool:
        return self._status_value() == self.moderation_config().pending_value

    def is_approved(self) -> bool:
        return self._status_value() == self.moderation_config().approved_value

    def is_rejected(self) -> bool:
        return self._status_value() == self.moderation_config().rejected_value

    @property
    def moderation_status(self) -> Status:
        return self.moderation_config().status_of(self._status_value())

    # --- Instance transitions ---

    async def approve(self, session: AsyncSession) -> None:
        await self._moderate(session, Status.APPROVED)

    async def reject(self, session: AsyncSession) -> None:
        await self._moderate(session, Status.REJECTED)

    async def _moderate(self, session: AsyncSession, status: Status) -> None:
        check_stamp_columns(type(self))
        for name, value in self.moderation_config().stamp_values(status).items():
            setattr(self, name, value)
        session.add(self)
        await session.flush()
        logger.info(
            "record_moderated",
            extra={"model": type(self).__name__, "status": status.value},
        )

    # --- Type-level queries and transitions ---

    @classmethod
    def moderated(cls, status_filter: StatusFilter = StatusFilter.DEFAULT) -> ModeratedQuery:
        return ModeratedQuery(cls, status_filter=status_filter)

    @classmethod
    def pending(cls) -> ModeratedQuery:
        return cls.moderated(StatusFilter.PENDING)

    @classmethod
    def rejected(cls) -> ModeratedQuery:
        return cls.moderated(StatusFilter.REJECTED)

    @classmethod
    def with_pending(cls) -> ModeratedQuery:
        return cls.moderated(StatusFilter.WITH_PENDING)

    @classmethod
    def with_rejected(cls) -> ModeratedQuery:
        return cls.moderated(StatusFilter.WITH_REJECTED)

    @classmethod
    def with_any_status(cls) -> ModeratedQuery:
        return cls.moderated(StatusFilter.ANY)

    @classmethod
    async def approve_by_id(cls, session: AsyncSession, *ids) -> int:
        return await cls.with_any_status().approve(session, *ids)

    @classmethod
    async def reject_by_id(cls, session: AsyncSession, *ids) -> int:
        return await cls.with_any_status().reject(session, *ids)


class Moderatable(ModeratableMixin):
    """ModeratableMixin plus the three columns under their default names."""

    @declared_attr
    def status(cls):
        pending = cls.moderation_config().pending_value
        column_type = Integer if isinstance(pending, int) else String(32)
        return Column(column_type, nullable=False, default=pending, index=True)

    @declared_attr
    def moderated_at(cls):
        return Column(DateTime(timezone=True), nullable=True)

    @declared_attr
    def moderated_by(cls):
        return Column(String, nullable=True)


@event.listens_for(ModeratableMixin, "init", propagate=True)
def _default_to_pending(target, args, kwargs):
    """New instances start PENDING in memory unless a status is passed."""
    config = type(target).moderation_config()
    if config.status_column not in kwargs:
        kwargs[config.status_column] = config.pending_value
