"""Tests for src/domain/services/pagination.py."""

from unittest.mock import AsyncMock

from src.domain.models.pagination import PageWindow
from src.domain.services.pagination import compute_window, paginate


def _search(total, rows=None):
    search = AsyncMock()
    search.count.return_value = total
    search.page.return_value = rows if rows is not None else []
    return search


# --- compute_window ---

def test_window_from_start_row():
    assert compute_window(25, 10, 20) == PageWindow(index=2, size=10)


def test_window_rounds_start_row_down_to_page():
    assert compute_window(25, 10, 19) == PageWindow(index=1, size=10)


def test_window_first_page():
    assert compute_window(25, 10, 0) == PageWindow(index=0, size=10)


def test_zero_page_size_means_single_page_of_everything():
    assert compute_window(25, 0, 20) == PageWindow(index=0, size=25)


def test_zero_total_has_no_window():
    assert compute_window(0, 10, 0) is None


# --- paginate ---

async def test_paginate_fetches_computed_window():
    search = _search(25, ["a", "b"])
    assert await paginate(search, 10, 20) == ["a", "b"]
    search.page.assert_awaited_once_with(PageWindow(index=2, size=10))


async def test_paginate_without_page_size_fetches_everything():
    search = _search(7)
    await paginate(search, 0, 5)
    search.page.assert_awaited_once_with(PageWindow(index=0, size=7))


async def test_paginate_empty_never_fetches_page():
    search = _search(0)
    assert await paginate(search, 10, 0) == []
    search.page.assert_not_awaited()


async def test_paginate_counts_once():
    search = _search(3, ["x"])
    await paginate(search, 10, 0)
    search.count.assert_awaited_once()
