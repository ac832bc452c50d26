"""Uniform failure-to-response mapping."""

from __future__ import annotations

import logging
from http import HTTPStatus

from src.domain.exceptions import DomainError, NotFoundError
from src.domain.models.responses import ServiceResponse

logger = logging.getLogger(__name__)


class ErrorMapper:
    """Classifies a failure into a (status, message) ServiceResponse.

    DomainErrors already know their status and are surfaced verbatim.
    Everything else is logged with the "while doing" label of the failed
    operation and reported as 400 Bad Request.
    """

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._log = log or logger

    def handle(self, exc: BaseException, while_doing: str) -> ServiceResponse:
        if isinstance(exc, DomainError):
            return ServiceResponse.message(exc.status, exc.message)

        self._log.error("%s%s", while_doing, exc, exc_info=exc)
        return ServiceResponse.message(HTTPStatus.BAD_REQUEST, describe(exc))

    @staticmethod
    def not_found(entity_name: str, key: object) -> NotFoundError:
        return NotFoundError.for_key(entity_name, key)


def describe(exc: BaseException) -> str:
    """Human-readable description of an unclassified failure."""
    return str(exc) or type(exc).__name__
