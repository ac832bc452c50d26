"""Domain services package."""

from .errors import ErrorMapper
from .pagination import compute_window, paginate
from .pipeline import RepositoryService, ResourceDefinition
from .sorting import parse_sort

__all__ = [
    "ErrorMapper",
    "RepositoryService",
    "ResourceDefinition",
    "compute_window",
    "paginate",
    "parse_sort",
]
