"""Page window value object."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class PageWindow(BaseModel):
    """The (page index, page size) slice of a result set to materialize.

    index is always derived from a start row, never taken from the client.
    """

    model_config = ConfigDict(frozen=True)

    index: int = Field(ge=0)
    size: int = Field(ge=0)

    @property
    def offset(self) -> int:
        return self.index * self.size
