"""Fruit endpoints."""

from __future__ import annotations

from src.api.routers.resource import build_resource_router
from src.domain.models.fruits import FruitRead, FruitWrite
from src.infrastructure.persistence.models.fruits import Fruit
from src.infrastructure.persistence.repositories.fruits import fruit_service


def fruit_from_payload(payload: FruitWrite, key: str | None) -> Fruit:
    if key is None:
        return Fruit(name=payload.name)
    return Fruit(uuid=key, name=payload.name)


router = build_resource_router(
    fruit_service(),
    write_model=FruitWrite,
    read_model=FruitRead,
    to_entity=fruit_from_payload,
    key_type=str,
)
