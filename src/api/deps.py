"""FastAPI dependency providers: one session and one context per request."""

from __future__ import annotations

from collections.abc import AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.context import RequestContext
from src.infrastructure.persistence.session import SqlSessionGateway


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    factory = request.app.state.session_factory
    async with factory() as session:
        yield session


def get_request_context(
    request: Request,
    session: AsyncSession = Depends(get_db_session),
) -> RequestContext:
    """Bind the request's session and query parameters into a RequestContext."""
    return RequestContext(
        session=SqlSessionGateway(session),
        params=dict(request.query_params),
    )


__all__ = [
    "get_db_session",
    "get_request_context",
]
