from fastapi import APIRouter

from src.api.routers import fruits


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(fruits.router, prefix="/fruits", tags=["fruits"])
    return router


__all__ = [
    "create_api_router",
]
