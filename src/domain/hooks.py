"""Resource extension points.

A HookSet is a plain value of optional async callables, one per
pre/post step of each operation.  Every hook receives the RequestContext
and returns a HookResult: either the (possibly transformed) value to
continue with, or a DomainError that stops the pipeline.  Unset hooks pass
their input through unchanged.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from src.domain.context import RequestContext
from src.domain.exceptions import DomainError

V = TypeVar("V")


@dataclass(frozen=True)
class HookResult(Generic[V]):
    """Explicit success/failure outcome of a hook."""

    value: V | None = None
    error: DomainError | None = None

    @classmethod
    def success(cls, value: V) -> HookResult[V]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: DomainError) -> HookResult[V]:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> V:
        """Return the value, or raise the carried error."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]


Hook = Callable[[RequestContext, Any], Awaitable[HookResult[Any]]]
KeyedHook = Callable[[RequestContext, Any, Any], Awaitable[HookResult[Any]]]


async def passthrough(ctx: RequestContext, value: V) -> HookResult[V]:
    return HookResult.success(value)


async def keyed_passthrough(ctx: RequestContext, key: Any, value: V) -> HookResult[V]:
    return HookResult.success(value)


@dataclass(frozen=True)
class HookSet:
    """Pre/post transforms for each operation.

    pre_update and post_update also receive the key from the request path.
    post_fetch may receive None (no entity); the pipeline raises NotFound
    after it runs if the value is still None.
    """

    pre_persist: Hook = passthrough
    post_persist: Hook = passthrough
    pre_fetch: Hook = passthrough
    post_fetch: Hook = passthrough
    pre_update: KeyedHook = keyed_passthrough
    post_update: KeyedHook = keyed_passthrough
    pre_delete: Hook = passthrough
    post_delete: Hook = passthrough
    post_list: Hook = passthrough
