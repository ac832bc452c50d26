"""Collaborator interfaces of the request pipeline.

All abstractions are defined here with abc.ABC and @abstractmethod.
Concrete implementations live in src/infrastructure/persistence/ and are
wired at the application boundary via dependency injection.
"""

from .base import SearchHandle, SearchProvider, SessionGateway

__all__ = [
    "SearchHandle",
    "SearchProvider",
    "SessionGateway",
]
