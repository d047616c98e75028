"""Generic async repository with pagination and stale-write detection."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from sqlalchemy import delete as sql_delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.exc import StaleDataError

from supplier_api.core.exceptions import ConcurrencyConflictError
from supplier_api.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseRepository(Generic[ModelT]):
    """Generic CRUD repository over a single mapped table.

    The session is owned by the caller (one per request); the repository only
    flushes. Updates and deletes that match no row (the row vanished under a
    concurrent request) surface as :class:`ConcurrencyConflictError` with the session
    already rolled back.
    """

    model: type[ModelT]

    def __init__(self, session: AsyncSession):
        self._session = session

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _base_query(self):
        return select(self.model)

    def _entity_name(self) -> str:
        return self.model.__name__

    async def _flush_or_conflict(self, instance: ModelT) -> None:
        entity_id = instance.id  # read before a rollback expires the instance
        try:
            await self._session.flush()
        except StaleDataError as exc:
            await self._session.rollback()
            raise ConcurrencyConflictError(self._entity_name(), entity_id) from exc

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    async def get_by_id(self, entity_id: int) -> ModelT | None:
        result = await self._session.execute(
            self._base_query().where(self.model.id == entity_id)
        )
        return result.scalars().first()

    async def exists(self, entity_id: int) -> bool:
        result = await self._session.execute(
            select(self.model.id).where(self.model.id == entity_id)
        )
        return result.first() is not None

    async def list(
        self,
        *,
        offset: int = 0,
        limit: int = 10,
    ) -> tuple[list[ModelT], int]:
        """Return (items, total_count) for one page, in id (insertion) order."""
        q = self._base_query()

        count_q = select(func.count()).select_from(q.subquery())
        total = (await self._session.execute(count_q)).scalar_one()

        q = q.order_by(self.model.id).offset(offset).limit(limit)

        items = (await self._session.execute(q)).scalars().all()
        return list(items), total

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    async def create(self, **kwargs: Any) -> ModelT:
        kwargs.pop("id", None)
        instance = self.model(**kwargs)
        self._session.add(instance)
        await self._session.flush()  # populate id
        await self._session.refresh(instance)
        return instance

    async def save(self, instance: ModelT) -> ModelT:
        """Flush pending changes on an already-loaded instance."""
        await self._flush_or_conflict(instance)
        await self._session.refresh(instance)
        return instance

    async def delete(self, instance: ModelT) -> None:
        entity_id = instance.id
        result = await self._session.execute(
            sql_delete(self.model).where(self.model.id == entity_id)
        )
        if result.rowcount == 0:
            await self._session.rollback()
            raise ConcurrencyConflictError(self._entity_name(), entity_id)
