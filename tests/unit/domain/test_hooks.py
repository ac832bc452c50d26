"""Tests for src/domain/hooks.py."""

from unittest.mock import AsyncMock

import pytest

from src.domain.context import RequestContext
from src.domain.exceptions import ConflictError
from src.domain.hooks import HookResult, HookSet


def _ctx():
    return RequestContext(session=AsyncMock())


# --- HookResult ---

def test_success_is_ok_and_unwraps_value():
    result = HookResult.success(42)
    assert result.ok is True
    assert result.unwrap() == 42


def test_success_may_carry_none():
    assert HookResult.success(None).unwrap() is None


def test_failure_is_not_ok():
    assert HookResult.failure(ConflictError("dup")).ok is False


def test_failure_unwrap_raises_carried_error():
    err = ConflictError("dup")
    with pytest.raises(ConflictError) as exc_info:
        HookResult.failure(err).unwrap()
    assert exc_info.value is err


# --- HookSet defaults ---

async def test_default_hooks_pass_value_through():
    hooks = HookSet()
    for hook in (
        hooks.pre_persist,
        hooks.post_persist,
        hooks.pre_fetch,
        hooks.post_fetch,
        hooks.pre_delete,
        hooks.post_delete,
        hooks.post_list,
    ):
        assert (await hook(_ctx(), "value")).unwrap() == "value"


async def test_default_keyed_hooks_pass_entity_through():
    hooks = HookSet()
    assert (await hooks.pre_update(_ctx(), "k", "entity")).unwrap() == "entity"
    assert (await hooks.post_update(_ctx(), "k", "entity")).unwrap() == "entity"


async def test_override_replaces_single_hook():
    async def shout(ctx, value):
        return HookResult.success(value.upper())

    hooks = HookSet(pre_persist=shout)
    assert (await hooks.pre_persist(_ctx(), "apple")).unwrap() == "APPLE"
    assert (await hooks.post_persist(_ctx(), "apple")).unwrap() == "apple"
