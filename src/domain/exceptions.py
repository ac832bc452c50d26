"""Resource domain specific exceptions.

Every error the request pipeline is expected to surface verbatim derives
from DomainError and carries its own HTTP-style status and message.
Anything else reaching the pipeline's recovery stage is unclassified and
is reported as 400 Bad Request.
"""

from __future__ import annotations

from http import HTTPStatus


class DomainError(Exception):
    """Base class for resource errors with an explicit status and message."""

    status: int = HTTPStatus.BAD_REQUEST

    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status is not None:
            self.status = status


class InvalidInputError(DomainError):
    """Raised when required input is malformed or absent (e.g. a null create body)."""

    status = HTTPStatus.BAD_REQUEST


class NotFoundError(DomainError):
    """Raised when a key lookup yields no entity."""

    status = HTTPStatus.NOT_FOUND

    @classmethod
    def for_key(cls, entity_name: str, key: object) -> NotFoundError:
        return cls(f"Object [{entity_name}] with id [{key}] not found")


class SortSyntaxError(DomainError):
    """Raised when an ordering clause carries a direction other than asc/desc."""

    status = HTTPStatus.BAD_REQUEST


class ConflictError(DomainError):
    """Raised when a business rule such as uniqueness rejects the request."""

    status = HTTPStatus.CONFLICT
