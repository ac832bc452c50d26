"""Tests for the Fruit resource: search provider, uniqueness hook, full pipeline."""

from unittest.mock import AsyncMock

import pytest

from src.domain.context import RequestContext
from src.domain.exceptions import ConflictError
from src.domain.models.pagination import PageWindow
from src.domain.models.sorting import SortSpec
from src.infrastructure.persistence.models.fruits import Fruit
from src.infrastructure.persistence.repositories.fruits import (
    DEFAULT_ORDER_BY,
    FruitSearchProvider,
    ensure_unique_name,
    fruit_resource,
    fruit_service,
    is_new,
)
from src.infrastructure.persistence.session import SqlSessionGateway


def _ctx(session, **params):
    return RequestContext(session=SqlSessionGateway(session), params=params)


# --- resource definition ---

def test_fruit_resource_defaults():
    resource = fruit_resource()
    assert resource.entity_type is Fruit
    assert resource.default_order_by == DEFAULT_ORDER_BY == "name asc"
    assert resource.name.endswith("fruits.Fruit")
    assert resource.hooks.pre_persist is ensure_unique_name


async def test_provider_requires_sql_gateway():
    ctx = RequestContext(session=AsyncMock())
    with pytest.raises(TypeError):
        await FruitSearchProvider().get_search(ctx, None)


# --- search provider ---

async def test_search_without_filter_counts_everything(session, fruits):
    search = await FruitSearchProvider().get_search(_ctx(session), None)
    assert await search.count() == 4


async def test_like_name_param_filters_case_insensitively(session, fruits):
    search = await FruitSearchProvider().get_search(_ctx(session, **{"like.name": "AP"}), None)
    assert await search.count() == 2


async def test_blank_like_name_is_ignored(session, fruits):
    search = await FruitSearchProvider().get_search(_ctx(session, **{"like.name": " "}), None)
    assert await search.count() == 4


async def test_search_applies_sort(session, fruits):
    search = await FruitSearchProvider().get_search(_ctx(session), SortSpec.by("name"))
    rows = await search.page(PageWindow(index=0, size=1))
    assert rows[0].name == "Apricot"


# --- uniqueness ---

async def test_is_new_true_for_unknown_name(session, fruits):
    assert await is_new(_ctx(session), "mango") is True


async def test_is_new_false_for_stored_name(session, fruits):
    assert await is_new(_ctx(session), "banana") is False


async def test_ensure_unique_name_fails_with_conflict(session, fruits):
    result = await ensure_unique_name(_ctx(session), Fruit(name="banana"))
    assert result.ok is False
    assert isinstance(result.error, ConflictError)
    assert result.error.message == "Item already present in db"


# --- full pipeline over SQLite ---

async def test_create_then_fetch_round_trip(session):
    service = fruit_service()
    created = await service.persist(_ctx(session), Fruit(name="mango"))
    assert created.status == 200

    fetched = await service.fetch(_ctx(session), created.body.uuid)
    assert fetched.status == 200
    assert (fetched.body.uuid, fetched.body.name) == (created.body.uuid, "mango")


async def test_duplicate_create_is_conflict(session, fruits):
    response = await fruit_service().persist(_ctx(session), Fruit(name="apple"))
    assert response.status == 409
    assert response.body == {"message": "Item already present in db"}


async def test_fetch_unknown_key_names_fruit_class(session):
    response = await fruit_service().fetch(_ctx(session), "no-such-key")
    assert response.status == 404
    assert response.body["message"].startswith("Object [")
    assert "fruits.Fruit" in response.body["message"]
    assert "[no-such-key]" in response.body["message"]


async def test_update_changes_name(session, fruits):
    key = fruits[0].uuid
    response = await fruit_service().update(_ctx(session), key, Fruit(uuid=key, name="plantain"))
    assert response.status == 200
    assert (await session.get(Fruit, key)).name == "plantain"


async def test_list_default_order_is_name_ascending(session, fruits):
    response = await fruit_service().get_list(_ctx(session), 0, 2)
    assert [f.name for f in response.body] == ["Apricot", "apple"]


async def test_list_unknown_sort_field_is_bad_request(session, fruits):
    response = await fruit_service().get_list(_ctx(session), order_by="colour:asc")
    assert response.status == 400
    assert "colour" in response.body["message"]


async def test_list_size_with_filter(session, fruits):
    response = await fruit_service().list_size(_ctx(session, **{"like.name": "an"}))
    assert response.body == 1
    assert response.headers["listSize"] == "1"


async def test_list_with_filter_succeeds(session, fruits):
    response = await fruit_service().get_list(_ctx(session, **{"like.name": "err"}))
    assert response.status == 200
    assert [f.name for f in response.body] == ["cherry"]
    assert response.headers["listSize"] == "1"
