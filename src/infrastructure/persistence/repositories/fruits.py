"""Fruit resource: search provider, hooks and resource definition."""

from __future__ import annotations

import logging

from sqlalchemy import func, select
from sqlalchemy.sql.elements import ColumnElement

from src.domain.context import RequestContext
from src.domain.exceptions import ConflictError
from src.domain.hooks import HookResult, HookSet
from src.domain.models.sorting import SortSpec
from src.domain.repositories.base import SearchProvider
from src.domain.services.pipeline import RepositoryService, ResourceDefinition
from src.infrastructure.persistence.models.fruits import Fruit
from src.infrastructure.persistence.search import SqlSearch
from src.infrastructure.persistence.session import SqlSessionGateway

logger = logging.getLogger(__name__)

DEFAULT_ORDER_BY = "name asc"
LIKE_NAME = "like.name"


def _name_like(name: str) -> ColumnElement[bool]:
    return func.lower(Fruit.name).like(name)


FRUIT_FILTERS = {LIKE_NAME: _name_like}


def _sql_session(ctx: RequestContext) -> SqlSessionGateway:
    if not isinstance(ctx.session, SqlSessionGateway):
        raise TypeError("Fruit resource requires a SqlSessionGateway")
    return ctx.session


class FruitSearchProvider(SearchProvider[Fruit]):
    """Builds the Fruit search, honouring the like.name query parameter."""

    async def get_search(self, ctx: RequestContext, sort: SortSpec | None) -> SqlSearch[Fruit]:
        search = SqlSearch(_sql_session(ctx).session, Fruit, FRUIT_FILTERS, sort)
        if ctx.has_param(LIKE_NAME):
            search.filter(LIKE_NAME, name=ctx.like_param(LIKE_NAME))
        return search


async def is_new(ctx: RequestContext, name: str) -> bool:
    """True when no fruit with exactly this name exists."""
    stmt = select(func.count()).select_from(Fruit).where(Fruit.name == name)
    result = await _sql_session(ctx).session.execute(stmt)
    return result.scalar_one() == 0


async def ensure_unique_name(ctx: RequestContext, fruit: Fruit) -> HookResult[Fruit]:
    """Pre-persist hook: reject a fruit whose name is already stored."""
    if await is_new(ctx, fruit.name):
        return HookResult.success(fruit)
    logger.info("Rejecting duplicate fruit %r", fruit.name)
    return HookResult.failure(ConflictError("Item already present in db"))


def fruit_resource() -> ResourceDefinition[Fruit]:
    return ResourceDefinition(
        entity_type=Fruit,
        search=FruitSearchProvider(),
        hooks=HookSet(pre_persist=ensure_unique_name),
        default_order_by=DEFAULT_ORDER_BY,
    )


def fruit_service() -> RepositoryService[Fruit, str]:
    return RepositoryService(fruit_resource())
