"""Turning ServiceResponses into HTTP responses."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import replace
from http import HTTPStatus
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response

from src.domain.context import RequestContext
from src.domain.models.responses import ServiceResponse
from src.domain.services.errors import ErrorMapper
from src.infrastructure.persistence.session import SqlSessionGateway

logger = logging.getLogger(__name__)

_errors = ErrorMapper(logger)


async def complete(
    ctx: RequestContext,
    result: ServiceResponse,
    serialize: Callable[[Any], Any] | None = None,
) -> Response:
    """Serialize the body, then commit on success or roll back otherwise.

    A failing serializer or commit is mapped like any other pipeline failure
    and leaves the transaction rolled back.
    """
    if result.is_success and serialize is not None:
        try:
            result = replace(result, body=serialize(result.body))
        except Exception as exc:
            result = _errors.handle(exc, "serialize: ")

    gateway = ctx.session
    if not isinstance(gateway, SqlSessionGateway):
        return render(result)

    if result.is_success:
        try:
            await gateway.commit()
        except Exception as exc:
            await gateway.rollback()
            result = _errors.handle(exc, "commit: ")
    else:
        await gateway.rollback()
    return render(result)


def render(result: ServiceResponse) -> Response:
    # 204 responses must not carry a body.
    if result.status == HTTPStatus.NO_CONTENT:
        return Response(status_code=HTTPStatus.NO_CONTENT, headers=result.headers)

    return JSONResponse(
        status_code=result.status,
        content=jsonable_encoder(result.body),
        headers=result.headers,
    )


def validation_failure(exc: RequestValidationError) -> ServiceResponse:
    """Malformed or missing request input, reported as a 400 message."""
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        message = str(error.get("msg", "invalid input"))
        problems.append(f"{location}: {message}" if location else message)
    return ServiceResponse.message(HTTPStatus.BAD_REQUEST, "; ".join(problems) or "invalid input")


def install_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def _validation_error_handler(_request: Request, exc: RequestValidationError) -> Response:
        logger.info("Rejected request input: %s", exc.errors())
        return render(validation_failure(exc))
