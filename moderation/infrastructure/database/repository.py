# moderation/infrastructure/database/repository.py

from typing import Type, TypeVar, Generic, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from moderation.domain.status import StatusFilter
from moderation.scope.query import ModeratedQuery

T = TypeVar("T")


class ModeratedRepository(Generic[T]):
    """Reads take an explicit StatusFilter (DEFAULT unless given). Writes commit."""

    def __init__(self, model: Type[T]):
        self.model = model

    def query(self, status_filter: StatusFilter = StatusFilter.DEFAULT) -> ModeratedQuery:
        return ModeratedQuery(self.model, status_filter=status_filter)

    async def get_by_id(
        self,
        db: AsyncSession,
        id,
        status_filter: StatusFilter = StatusFilter.DEFAULT,
    ) -> Optional[T]:
        return await self.query(status_filter).get(db, id)

    async def list_all(
        self,
        db: AsyncSession,
        *criteria,
        status_filter: StatusFilter = StatusFilter.DEFAULT,
    ) -> List[T]:
        return await self.query(status_filter).where(*criteria).all(db)

    async def create(
        self,
        db: AsyncSession,
        obj: T,
    ) -> T:
        db.add(obj)
        await db.commit()
        await db.refresh(obj)
        return obj

    async def delete(
        self,
        db: AsyncSession,
        obj: T,
    ) -> None:
        await db.delete(obj)
        await db.commit()

    async def approve(self, db: AsyncSession, *ids) -> int:
        rows = await self.query(StatusFilter.ANY).approve(db, *ids)
        await db.commit()
        return rows

    async def reject(self, db: AsyncSession, *ids) -> int:
        rows = await self.query(StatusFilter.ANY).reject(db, *ids)
        await db.commit()
        return rows
