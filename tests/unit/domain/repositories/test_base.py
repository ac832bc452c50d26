"""Tests for src/domain/repositories/base.py."""

import pytest

from src.domain.repositories.base import SearchHandle, SearchProvider, SessionGateway


def test_session_gateway_cannot_be_instantiated_directly():
    with pytest.raises(TypeError):
        SessionGateway()  # type: ignore[abstract]


def test_session_gateway_concrete_subclass_must_implement_all_methods():
    class _Partial(SessionGateway):
        async def find(self, entity_type, key): return None
        # missing persist, merge, remove, flush

    with pytest.raises(TypeError):
        _Partial()  # type: ignore[abstract]


def test_session_gateway_full_concrete_subclass_instantiates():
    class _Full(SessionGateway):
        async def find(self, entity_type, key): return None
        async def persist(self, entity): return None
        async def merge(self, entity): return entity
        async def remove(self, entity): return None
        async def flush(self): return None

    assert _Full() is not None


def test_search_handle_requires_filter_count_and_page():
    class _Partial(SearchHandle):
        async def count(self): return 0

    with pytest.raises(TypeError):
        _Partial()  # type: ignore[abstract]


def test_search_provider_cannot_be_instantiated_directly():
    with pytest.raises(TypeError):
        SearchProvider()  # type: ignore[abstract]
