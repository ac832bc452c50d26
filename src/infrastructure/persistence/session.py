"""SQLAlchemy implementation of SessionGateway."""

from __future__ import annotations

from typing import Any, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.repositories.base import SessionGateway

T = TypeVar("T")


class SqlSessionGateway(SessionGateway):
    """Wraps the request's AsyncSession.

    persist() only adds the entity to the session; the INSERT is emitted
    by the following flush(), which is also when defaults (keys) are set.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @property
    def session(self) -> AsyncSession:
        return self._session

    async def find(self, entity_type: type[T], key: Any) -> T | None:
        return await self._session.get(entity_type, key)

    async def persist(self, entity: Any) -> None:
        self._session.add(entity)

    async def merge(self, entity: T) -> T:
        return await self._session.merge(entity)

    async def remove(self, entity: Any) -> None:
        await self._session.delete(entity)

    async def flush(self) -> None:
        await self._session.flush()

    async def commit(self) -> None:
        await self._session.commit()

    async def rollback(self) -> None:
        await self._session.rollback()
