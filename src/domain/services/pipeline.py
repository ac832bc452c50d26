"""Generic repository service: the request lifecycle of a CRUD resource.

Implements the seven operation pipelines:

  persist     pre-persist → persist → post-persist → flush          → 200 entity
  fetch       pre-fetch → find → post-fetch → not-found check       → 200 entity
  update      pre-update → merge → flush → post-update              → 200 entity
  delete      pre-delete → find → not-found check → remove → flush
              → post-delete                                         → 204 key
  exist       find → not-found check                                → 200 key
  list_size   search (unsorted) → count                             → 200 count
  get_list    parse sort → search → count → page → post-list        → 200 items

Each step is awaited in order and the first failure skips the rest.  Every
operation has exactly one recovery point, at its end, which hands the
failure to the ErrorMapper; operations never raise (cancellation aside).

The service holds no per-request state.  The session and query parameters
arrive in the RequestContext passed to every call.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Any, Generic, TypeVar

from src.domain.exceptions import InvalidInputError
from src.domain.hooks import HookSet
from src.domain.models.responses import ServiceResponse
from src.domain.repositories.base import SearchProvider
from src.domain.context import RequestContext
from src.domain.services.errors import ErrorMapper
from src.domain.services.pagination import paginate
from src.domain.services.sorting import parse_sort

logger = logging.getLogger(__name__)

T = TypeVar("T")
K = TypeVar("K")

DEFAULT_START_ROW = 0
DEFAULT_PAGE_SIZE = 10

LIST_HEADERS = ("startRow", "pageSize", "listSize")
EXPOSE_HEADERS = "Access-Control-Expose-Headers"


def qualified_name(entity_type: type) -> str:
    return f"{entity_type.__module__}.{entity_type.__qualname__}"


@dataclass(frozen=True)
class ResourceDefinition(Generic[T]):
    """Everything a concrete resource contributes to the generic service.

    default_order_by is a descriptor such as "name asc" used when the
    client sends no orderBy; None leaves unsorted lists unsorted.
    """

    entity_type: type[T]
    search: SearchProvider[T]
    hooks: HookSet = field(default_factory=HookSet)
    default_order_by: str | None = None
    entity_name: str | None = None

    @property
    def name(self) -> str:
        return self.entity_name or qualified_name(self.entity_type)


class RepositoryService(Generic[T, K]):
    """Orchestrates one resource's CRUD operations over a SessionGateway."""

    def __init__(
        self,
        resource: ResourceDefinition[T],
        errors: ErrorMapper | None = None,
    ) -> None:
        self.resource = resource
        self.hooks = resource.hooks
        self.errors = errors or ErrorMapper()

    # ─────────────────────────────────────────────────────────────────── #
    # Single-entity operations                                              #
    # ─────────────────────────────────────────────────────────────────── #

    async def find(self, ctx: RequestContext, key: K) -> T | None:
        return await ctx.session.find(self.resource.entity_type, key)

    async def persist(self, ctx: RequestContext, entity: T | None) -> ServiceResponse:
        logger.info("persist")
        try:
            if entity is None:
                logger.error("Failed to create resource: object is null")
                raise InvalidInputError("Failed to create resource: object is null")

            entity = (await self.hooks.pre_persist(ctx, entity)).unwrap()
            await ctx.session.persist(entity)
            entity = (await self.hooks.post_persist(ctx, entity)).unwrap()
            await ctx.session.flush()
            return ServiceResponse(HTTPStatus.OK, entity)
        except Exception as exc:
            return self.errors.handle(exc, "persist: ")

    async def fetch(self, ctx: RequestContext, key: K) -> ServiceResponse:
        logger.info("fetch: %s", key)
        try:
            key = (await self.hooks.pre_fetch(ctx, key)).unwrap()
            entity = await self.find(ctx, key)
            entity = (await self.hooks.post_fetch(ctx, entity)).unwrap()
            if entity is None:
                raise self.errors.not_found(self.resource.name, key)
            return ServiceResponse(HTTPStatus.OK, entity)
        except Exception as exc:
            return self.errors.handle(exc, "fetch: ")

    async def update(self, ctx: RequestContext, key: K, entity: T | None) -> ServiceResponse:
        logger.info("update: %s", key)
        try:
            if entity is None:
                raise InvalidInputError("Failed to update resource: object is null")

            entity = (await self.hooks.pre_update(ctx, key, entity)).unwrap()
            merged = await ctx.session.merge(entity)
            await ctx.session.flush()
            merged = (await self.hooks.post_update(ctx, key, merged)).unwrap()
            return ServiceResponse(HTTPStatus.OK, merged)
        except Exception as exc:
            return self.errors.handle(exc, "update: ")

    async def delete(self, ctx: RequestContext, key: K) -> ServiceResponse:
        logger.info("delete: %s", key)
        try:
            key = (await self.hooks.pre_delete(ctx, key)).unwrap()
            entity = await self.find(ctx, key)
            if entity is None:
                raise self.errors.not_found(self.resource.name, key)
            await ctx.session.remove(entity)
            await ctx.session.flush()
            key = (await self.hooks.post_delete(ctx, key)).unwrap()
            return ServiceResponse(HTTPStatus.NO_CONTENT, key)
        except Exception as exc:
            return self.errors.handle(exc, "delete: ")

    async def exist(self, ctx: RequestContext, key: K) -> ServiceResponse:
        logger.info("exist: %s", key)
        try:
            if await self.find(ctx, key) is None:
                raise self.errors.not_found(self.resource.name, key)
            return ServiceResponse(HTTPStatus.OK, key)
        except Exception as exc:
            return self.errors.handle(exc, "exist: ")

    # ─────────────────────────────────────────────────────────────────── #
    # Collection operations                                                 #
    # ─────────────────────────────────────────────────────────────────── #

    async def list_size(self, ctx: RequestContext) -> ServiceResponse:
        logger.info("getListSize")
        try:
            search = await self.resource.search.get_search(ctx, None)
            count = await search.count()
            return ServiceResponse(
                HTTPStatus.OK,
                count,
                {EXPOSE_HEADERS: "listSize", "listSize": str(count)},
            )
        except Exception as exc:
            return self.errors.handle(exc, "getListSize: ")

    async def get_list(
        self,
        ctx: RequestContext,
        start_row: int = DEFAULT_START_ROW,
        page_size: int = DEFAULT_PAGE_SIZE,
        order_by: str | None = None,
    ) -> ServiceResponse:
        logger.info("getList")
        try:
            sort = parse_sort(order_by, self.resource.default_order_by)
            search = await self.resource.search.get_search(ctx, sort)
            items: list[Any] = await paginate(search, page_size, start_row)
            items = (await self.hooks.post_list(ctx, items)).unwrap()
            return ServiceResponse(
                HTTPStatus.OK,
                items,
                {
                    EXPOSE_HEADERS: ", ".join(LIST_HEADERS),
                    "startRow": str(start_row),
                    "pageSize": str(page_size),
                    "listSize": str(len(items)),
                },
            )
        except Exception as exc:
            return self.errors.handle(exc, "getList: ")
