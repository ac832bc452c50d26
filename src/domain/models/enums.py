"""Domain enumerations.

String-valued enums use the str mixin so they serialize cleanly to JSON
and remain comparable to plain strings (FastAPI / Pydantic default behaviour).
"""

from enum import Enum


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def from_token(cls, token: str) -> "SortDirection | None":
        """Return the direction named by token (case-insensitive), or None."""
        try:
            return cls(token.strip().lower())
        except ValueError:
            return None
