"""Generative moderated query: explicit status selection, listing and bulk transitions."""

import logging
from typing import Generic, Iterable, List, Optional, TypeVar

from sqlalchemy import Select, func, inspect, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from moderation.domain.exceptions import ModerationConfigError
from moderation.domain.status import Status, StatusFilter
from moderation.scope.options import INCLUDE_ALL_STATUSES
from moderation.scope.status_filter import check_stamp_columns, status_criteria

logger = logging.getLogger(__name__)

M = TypeVar("M")


class ModeratedQuery(Generic[M]):
    """
    Immutable query over a moderated model. Every builder method returns a new query.
    Exactly one status selection is active; later selections replace earlier ones.
    Statements carry INCLUDE_ALL_STATUSES so the default filter hook does not apply twice.
    """

    def __init__(
        self,
        model: type,
        *,
        criteria: Iterable = (),
        status_filter: StatusFilter = StatusFilter.DEFAULT,
        strict: Optional[bool] = None,
    ) -> None:
        self.model = model
        self._criteria = tuple(criteria)
        self._status_filter = status_filter
        self._strict = strict

    def __repr__(self) -> str:
        return (
            f"ModeratedQuery({self.model.__name__}, status_filter={self._status_filter!r}, "
            f"criteria={len(self._criteria)}, strict={self._strict!r})"
        )

    @property
    def status_filter(self) -> StatusFilter:
        return self._status_filter

    def _replace(self, **changes) -> "ModeratedQuery[M]":
        values = {
            "criteria": self._criteria,
            "status_filter": self._status_filter,
            "strict": self._strict,
        }
        values.update(changes)
        return ModeratedQuery(self.model, **values)

    # --- Narrowing ---

    def where(self, *criteria) -> "ModeratedQuery[M]":
        return self._replace(criteria=self._criteria + criteria)

    def strict_mode(self, strict: bool) -> "ModeratedQuery[M]":
        """Strictness of default() for this query only."""
        return self._replace(strict=strict)

    # --- Status selection ---

    def default(self) -> "ModeratedQuery[M]":
        return self._replace(status_filter=StatusFilter.DEFAULT)

    def pending(self) -> "ModeratedQuery[M]":
        return self._replace(status_filter=StatusFilter.PENDING)

    def rejected(self) -> "ModeratedQuery[M]":
        return self._replace(status_filter=StatusFilter.REJECTED)

    def with_pending(self) -> "ModeratedQuery[M]":
        return self._replace(status_filter=StatusFilter.WITH_PENDING)

    def with_rejected(self) -> "ModeratedQuery[M]":
        return self._replace(status_filter=StatusFilter.WITH_REJECTED)

    def with_any_status(self) -> "ModeratedQuery[M]":
        return self._replace(status_filter=StatusFilter.ANY)

    # --- Statements ---

    @property
    def statement(self) -> Select:
        stmt = select(self.model).where(*self._criteria)
        predicate = status_criteria(self.model, self._status_filter, strict=self._strict)
        if predicate is not None:
            stmt = stmt.where(predicate)
        return stmt.execution_options(**{INCLUDE_ALL_STATUSES: True})

    def _primary_key(self):
        columns = inspect(self.model).primary_key
        if len(columns) != 1:
            raise ModerationConfigError(
                f"{self.model.__name__}: identifier lookup needs a single-column primary key"
            )
        return columns[0]

    # --- Execution ---

    async def all(self, session: AsyncSession) -> List[M]:
        result = await session.execute(self.statement)
        return list(result.scalars().all())

    async def first(self, session: AsyncSession) -> Optional[M]:
        result = await session.execute(self.statement.limit(1))
        return result.scalars().first()

    async def get(self, session: AsyncSession, ident) -> Optional[M]:
        stmt = self.statement.where(self._primary_key() == ident)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def count(self, session: AsyncSession) -> int:
        stmt = (
            select(func.count())
            .select_from(self.statement.subquery())
            .execution_options(**{INCLUDE_ALL_STATUSES: True})
        )
        result = await session.execute(stmt)
        return result.scalar_one()

    # --- Transitions ---

    async def approve(self, session: AsyncSession, *ids) -> int:
        """Set APPROVED with stamps on every matched row (or only ids). Returns rows affected."""
        return await self._transition(session, Status.APPROVED, ids)

    async def reject(self, session: AsyncSession, *ids) -> int:
        """Set REJECTED with stamps on every matched row (or only ids). Returns rows affected."""
        return await self._transition(session, Status.REJECTED, ids)

    async def _transition(self, session: AsyncSession, status: Status, ids: tuple) -> int:
        # The status selection is dropped: rows are chosen by the other criteria only.
        config = self.model.moderation_config()
        check_stamp_columns(self.model)
        stmt = update(self.model).where(*self._criteria)
        if ids:
            stmt = stmt.where(self._primary_key().in_(ids))
        stmt = stmt.values(**config.stamp_values(status))
        result = await session.execute(stmt)
        logger.info(
            "records_moderated",
            extra={
                "model": self.model.__name__,
                "status": status.value,
                "ids": list(ids) if ids else None,
                "rows": result.rowcount,
            },
        )
        return result.rowcount
