"""Concrete resources built on the SQLAlchemy gateway and search handle.

Each module exposes a ResourceDefinition factory and a ready-to-use
RepositoryService factory for wiring at the application boundary.
"""

from __future__ import annotations

from .fruits import FruitSearchProvider, fruit_resource, fruit_service

__all__ = [
    "FruitSearchProvider",
    "fruit_resource",
    "fruit_service",
]
