"""Collaborator interfaces consumed by the request pipeline.

The pipeline never talks to a database directly.  It drives three
abstractions, each implemented once per persistence technology (see
src/infrastructure/persistence/) or once per resource:

  - SessionGateway: the request-scoped unit of work (find / persist /
    merge / remove / flush).
  - SearchHandle: a deferred query bound to one entity type that can be
    filtered, counted and paged.
  - SearchProvider: per-resource factory building a SearchHandle from the
    request context and an optional sort specification.

Design notes:
  - All I/O methods are async; each is a suspension point of the pipeline.
  - T is the entity type, K the key type.  The core never inspects entity
    fields beyond what the gateway needs to address them.
  - Unknown sort fields and filter names are the SearchHandle's to reject.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from src.domain.models.pagination import PageWindow
from src.domain.models.sorting import SortSpec

if TYPE_CHECKING:
    from src.domain.context import RequestContext

T = TypeVar("T")


class SessionGateway(ABC):
    """Asynchronous unit of work bound to one request."""

    @abstractmethod
    async def find(self, entity_type: type[T], key: Any) -> T | None:
        """Return the entity with the given key, or None if not found."""

    @abstractmethod
    async def persist(self, entity: Any) -> None:
        """Schedule a new entity for insertion."""

    @abstractmethod
    async def merge(self, entity: T) -> T:
        """Copy the state of a detached entity onto its persistent instance."""

    @abstractmethod
    async def remove(self, entity: Any) -> None:
        """Schedule a persistent entity for deletion."""

    @abstractmethod
    async def flush(self) -> None:
        """Write pending changes to the database."""


class SearchHandle(ABC, Generic[T]):
    """Filterable, countable, pageable query over one entity type."""

    @abstractmethod
    def filter(self, filter_name: str, /, **params: Any) -> SearchHandle[T]:
        """Enable the named filter predicate with its parameters; returns self."""

    @abstractmethod
    async def count(self) -> int:
        """Return the number of rows matching the enabled filters."""

    @abstractmethod
    async def page(self, window: PageWindow) -> list[T]:
        """Return the rows inside window, in sort order."""


class SearchProvider(ABC, Generic[T]):
    """Builds the filtered and sorted search for a resource."""

    @abstractmethod
    async def get_search(
        self, ctx: RequestContext, sort: SortSpec | None
    ) -> SearchHandle[T]:
        """Return a search handle honouring the request's filter parameters."""
