"""ASGI entry point: ``uvicorn src.api.main:app``."""

import uvicorn

from src.api.app import create_app
from src.config import get_settings

app = create_app()


if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run("src.api.main:app", host=settings.host, port=settings.port)
