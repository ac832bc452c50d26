"""Generic CRUD router for any RepositoryService.

    GET    /             paginated list (startRow, pageSize, orderBy)
    GET    /listSize     total count, also in the listSize header
    POST   /             create
    GET    /{id}         fetch
    PUT    /{id}         update
    DELETE /{id}         delete
    GET    /{id}/exist   existence check

Endpoint signatures are built from the resource's pydantic models, so this
module deliberately does not use postponed annotations.
"""

from collections.abc import Callable
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Query
from fastapi.responses import Response
from pydantic import BaseModel

from src.api.deps import get_request_context
from src.api.responses import complete
from src.domain.context import RequestContext
from src.domain.services.pipeline import (
    DEFAULT_PAGE_SIZE,
    DEFAULT_START_ROW,
    RepositoryService,
)

EntityFactory = Callable[[BaseModel, Any], Any]


def build_resource_router(
    service: RepositoryService,
    *,
    write_model: type[BaseModel],
    read_model: type[BaseModel],
    to_entity: EntityFactory,
    key_type: type = str,
) -> APIRouter:
    """Expose service over HTTP.

    to_entity(payload, key) builds the entity handed to the pipeline; key is
    None on create and the path key on update, so a payload can never move
    an entity to another key.
    """
    router = APIRouter()

    def serialize_one(entity: Any) -> dict[str, Any]:
        return read_model.model_validate(entity).model_dump(mode="json")

    def serialize_many(entities: list[Any]) -> list[dict[str, Any]]:
        return [serialize_one(entity) for entity in entities]

    @router.get("/", summary="List entities")
    async def get_list(
        start_row: int = Query(DEFAULT_START_ROW, ge=0, alias="startRow"),
        page_size: int = Query(DEFAULT_PAGE_SIZE, ge=0, alias="pageSize"),
        order_by: Optional[str] = Query(None, alias="orderBy"),
        ctx: RequestContext = Depends(get_request_context),
    ) -> Response:
        result = await service.get_list(ctx, start_row, page_size, order_by)
        return await complete(ctx, result, serialize_many)

    @router.get("/listSize", summary="Count entities")
    async def get_list_size(ctx: RequestContext = Depends(get_request_context)) -> Response:
        return await complete(ctx, await service.list_size(ctx))

    @router.post("/", summary="Create an entity")
    async def persist(
        payload: Optional[write_model] = Body(None),  # type: ignore[valid-type]
        ctx: RequestContext = Depends(get_request_context),
    ) -> Response:
        entity = to_entity(payload, None) if payload is not None else None
        return await complete(ctx, await service.persist(ctx, entity), serialize_one)

    @router.get("/{id}", summary="Fetch an entity")
    async def fetch(
        id: key_type,  # type: ignore[valid-type]
        ctx: RequestContext = Depends(get_request_context),
    ) -> Response:
        return await complete(ctx, await service.fetch(ctx, id), serialize_one)

    @router.put("/{id}", summary="Update an entity")
    async def update(
        id: key_type,  # type: ignore[valid-type]
        payload: Optional[write_model] = Body(None),  # type: ignore[valid-type]
        ctx: RequestContext = Depends(get_request_context),
    ) -> Response:
        entity = to_entity(payload, id) if payload is not None else None
        return await complete(ctx, await service.update(ctx, id, entity), serialize_one)

    @router.delete("/{id}", summary="Delete an entity")
    async def delete(
        id: key_type,  # type: ignore[valid-type]
        ctx: RequestContext = Depends(get_request_context),
    ) -> Response:
        return await complete(ctx, await service.delete(ctx, id))

    @router.get("/{id}/exist", summary="Check that an entity exists")
    async def exist(
        id: key_type,  # type: ignore[valid-type]
        ctx: RequestContext = Depends(get_request_context),
    ) -> Response:
        return await complete(ctx, await service.exist(ctx, id))

    return router
