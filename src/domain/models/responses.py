"""Transport-neutral result of a resource operation."""

from __future__ import annotations

from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Any


@dataclass
class ServiceResponse:
    """Status, body and headers produced by one pipeline run.

    Error responses carry a {"message": ...} body.  Header values are
    always strings so the HTTP layer can copy them verbatim.
    """

    status: int
    body: Any = None
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def is_success(self) -> bool:
        return self.status < HTTPStatus.BAD_REQUEST

    @classmethod
    def message(cls, status: int, message: str) -> ServiceResponse:
        return cls(status, {"message": message})
