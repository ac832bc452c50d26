"""Page window computation and page materialization."""

from __future__ import annotations

from typing import TypeVar

from src.domain.models.pagination import PageWindow
from src.domain.repositories.base import SearchHandle

T = TypeVar("T")


def compute_window(total: int, page_size: int, start_row: int) -> PageWindow | None:
    """Translate (total, page_size, start_row) into a PageWindow.

    Returns None when there is nothing to fetch.  A page_size of 0 means
    "no pagination": one page holding every row.
    """
    if total == 0:
        return None
    if page_size != 0:
        return PageWindow(index=start_row // page_size, size=page_size)
    return PageWindow(index=0, size=total)


async def paginate(search: SearchHandle[T], page_size: int, start_row: int) -> list[T]:
    """Count the search, then fetch the page containing start_row."""
    total = await search.count()
    window = compute_window(total, page_size, start_row)
    if window is None:
        return []
    return await search.page(window)
