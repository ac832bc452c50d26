"""Persistence package.

Importing this package registers every ORM mapper with Base.metadata
(required for Alembic autogenerate and SQLAlchemy mapper configuration)
and exports the SQLAlchemy collaborators and resource factories.
"""

from src.infrastructure.persistence.models import *  # noqa: F401, F403
from src.infrastructure.persistence.models import __all__ as _orm_all
from src.infrastructure.persistence.repositories import (
    FruitSearchProvider,
    fruit_resource,
    fruit_service,
)
from src.infrastructure.persistence.search import SqlSearch
from src.infrastructure.persistence.session import SqlSessionGateway

__all__ = _orm_all + [
    "FruitSearchProvider",
    "SqlSearch",
    "SqlSessionGateway",
    "fruit_resource",
    "fruit_service",
]
