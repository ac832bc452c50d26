"""Per-request context threaded through the pipeline, hooks and search providers."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from src.domain.repositories.base import SessionGateway


@dataclass(frozen=True)
class RequestContext:
    """The session and query parameters of exactly one request.

    Nothing here outlives the request; a new context is built for each one.
    """

    session: SessionGateway
    params: Mapping[str, str] = field(default_factory=dict)

    def has_param(self, name: str) -> bool:
        """True when the query parameter is present and not blank."""
        value = self.params.get(name)
        return value is not None and value.strip() != ""

    def param(self, name: str, default: str | None = None) -> str | None:
        return self.params.get(name, default)

    def like_param(self, name: str) -> str | None:
        """Lower-cased "%value%" pattern for case-insensitive LIKE filters."""
        if not self.has_param(name):
            return None
        return f"%{self.params[name].strip().lower()}%"
