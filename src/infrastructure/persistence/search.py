"""SQLAlchemy implementation of SearchHandle.

A SqlSearch wraps a SELECT over one mapped class.  Resources register the
filters they understand as named factories returning a SQL clause; a
request enables a filter by name with its parameters, mirroring
Hibernate-style named filter definitions:

    FILTERS = {"like.name": lambda name: func.lower(Fruit.name).like(name)}
    search = SqlSearch(session, Fruit, FILTERS, sort)
    search.filter("like.name", name="%app%")
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, Generic, TypeVar

from sqlalchemy import Select, func, inspect, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.elements import ColumnElement

from src.domain.models.enums import SortDirection
from src.domain.models.pagination import PageWindow
from src.domain.models.sorting import SortSpec
from src.domain.repositories.base import SearchHandle

T = TypeVar("T")

FilterFactory = Callable[..., ColumnElement[bool]]


class SqlSearch(SearchHandle[T], Generic[T]):
    def __init__(
        self,
        session: AsyncSession,
        model: type[T],
        filters: Mapping[str, FilterFactory] | None = None,
        sort: SortSpec | None = None,
        statement: Select[Any] | None = None,
    ) -> None:
        self._session = session
        self._model = model
        self._filters = dict(filters or {})
        self._stmt = statement if statement is not None else select(model)
        self._order_by = self._order_clauses(sort) if sort is not None else []

    @property
    def statement(self) -> Select[Any]:
        """The filtered and ordered SELECT this handle will run."""
        return self._stmt.order_by(*self._order_by)

    def filter(self, filter_name: str, /, **params: Any) -> SqlSearch[T]:
        factory = self._filters.get(filter_name)
        if factory is None:
            raise ValueError(f"Unknown filter {filter_name!r} for {self._model.__name__}")
        self._stmt = self._stmt.where(factory(**params))
        return self

    async def count(self) -> int:
        stmt = select(func.count()).select_from(self._stmt.subquery())
        result = await self._session.execute(stmt)
        return int(result.scalar_one())

    async def page(self, window: PageWindow) -> list[T]:
        stmt = self.statement.offset(window.offset).limit(window.size)
        result = await self._session.execute(stmt)
        return list(result.scalars())

    def _order_clauses(self, sort: SortSpec) -> list[Any]:
        columns = inspect(self._model).columns
        clauses = []
        for clause in sort.clauses:
            if clause.field not in columns:
                raise ValueError(f"Unknown sort field {clause.field!r} for {self._model.__name__}")
            column = columns[clause.field]
            clauses.append(column.desc() if clause.direction is SortDirection.DESC else column.asc())
        return clauses
