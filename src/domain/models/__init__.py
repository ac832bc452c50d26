"""Domain value objects.

These are pure domain objects with no ORM or transport concerns.
"""

from .enums import SortDirection
from .fruits import FruitRead, FruitWrite
from .pagination import PageWindow
from .responses import ServiceResponse
from .sorting import SortClause, SortSpec

__all__ = [
    "FruitRead",
    "FruitWrite",
    "PageWindow",
    "ServiceResponse",
    "SortClause",
    "SortDirection",
    "SortSpec",
]
