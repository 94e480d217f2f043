"""Typed query/write handle shared by every identity table."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, Generic, TypeVar

from sqlalchemy import ColumnElement, Select, func, inspect, select
from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)

TEntity = TypeVar("TEntity")


class IdentityRepository(Generic[TEntity]):
    """Query and write access to one mapped identity entity type.

    Repositories never flush or commit; the caller owns the session and its
    transaction. Database errors raised on flush are not caught here.
    """

    def __init__(self, session: AsyncSession, entity_type: type[TEntity]) -> None:
        self._session = session
        self._entity_type = entity_type

    @property
    def entity_type(self) -> type[TEntity]:
        return self._entity_type

    def select(self) -> Select[tuple[TEntity]]:
        """Return a SELECT for this entity type to refine with filters."""
        return select(self._entity_type)

    async def get(self, key: Any) -> TEntity | None:
        """Load by primary key; composite keys are passed as a tuple."""
        return await self._session.get(self._entity_type, key)

    def add(self, entity: TEntity) -> None:
        self._session.add(entity)
        logger.debug("Added %s", type(entity).__name__)

    def add_all(self, entities: Iterable[TEntity]) -> None:
        for entity in entities:
            self.add(entity)

    async def delete(self, entity: TEntity) -> None:
        identity = inspect(entity).identity
        await self._session.delete(entity)
        logger.info("Deleted %s %s", type(entity).__name__, identity)

    async def list_all(self) -> list[TEntity]:
        result = await self._session.execute(self.select())
        return list(result.scalars().all())

    async def count(self) -> int:
        stmt = select(func.count()).select_from(self._entity_type)
        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def _find_one(self, *criteria: ColumnElement[bool]) -> TEntity | None:
        result = await self._session.execute(self.select().where(*criteria))
        return result.scalar_one_or_none()

    async def _find_first(self, *criteria: ColumnElement[bool]) -> TEntity | None:
        """First match ordered by primary key, for lookups on non-unique columns."""
        stmt = self.select().where(*criteria).order_by(*self._primary_key()).limit(1)
        result = await self._session.execute(stmt)
        return result.scalars().first()

    def _primary_key(self) -> tuple[Any, ...]:
        return tuple(inspect(self._entity_type).primary_key)

    async def _find_all(self, *criteria: ColumnElement[bool]) -> list[TEntity]:
        result = await self._session.execute(self.select().where(*criteria))
        return list(result.scalars().all())
