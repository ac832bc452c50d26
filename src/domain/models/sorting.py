"""Sort specification value objects."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .enums import SortDirection


class SortClause(BaseModel):
    """One (field, direction) ordering key."""

    model_config = ConfigDict(frozen=True)

    field: str = Field(min_length=1)
    direction: SortDirection = SortDirection.ASC


class SortSpec(BaseModel):
    """Ordered sequence of sort clauses.

    Earlier clauses take precedence: clauses[0] is the primary sort key.
    Instances are immutable; then() returns a new spec.
    """

    model_config = ConfigDict(frozen=True)

    clauses: tuple[SortClause, ...] = Field(min_length=1)

    @classmethod
    def by(cls, field: str, direction: SortDirection = SortDirection.ASC) -> SortSpec:
        return cls(clauses=(SortClause(field=field, direction=direction),))

    def then(self, field: str, direction: SortDirection = SortDirection.ASC) -> SortSpec:
        return SortSpec(clauses=self.clauses + (SortClause(field=field, direction=direction),))

    def as_pairs(self) -> list[tuple[str, SortDirection]]:
        return [(c.field, c.direction) for c in self.clauses]

    def __len__(self) -> int:
        return len(self.clauses)
