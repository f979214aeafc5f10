# tests/core/test_pagination.py

import pytest

from stockroom.core.pagination import Page, clamp_page, page_count, slice_page


@pytest.mark.parametrize(
    "total,size,expected",
    [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (30, 15, 2), (31, 15, 3)],
)
def test_page_count(total, size, expected):
    assert page_count(total, size) == expected


def test_page_count_rejects_non_positive_size():
    with pytest.raises(ValueError):
        page_count(5, 0)


@pytest.mark.parametrize(
    "page,total,expected",
    [(0, 3, 1), (-4, 3, 1), (2, 3, 2), (9999, 2, 2), (5, 0, 1)],
)
def test_clamp_page(page, total, expected):
    assert clamp_page(page, total) == expected


def test_slice_page_returns_requested_window():
    items = list(range(7))
    assert slice_page(items, 1, 3) == [0, 1, 2]
    assert slice_page(items, 3, 3) == [6]
    assert slice_page(items, 4, 3) == []


def test_build_sets_navigation_flags():
    page = Page.build(list("abcde"), 2, 2)

    assert page.items == ["c", "d"]
    assert page.total_items == 5
    assert page.total_pages == 3
    assert page.current_page == 2
    assert page.has_prev is True
    assert page.has_next is True


def test_build_clamps_out_of_range_page():
    page = Page.build(list("abc"), 10, 2)

    assert page.current_page == 2
    assert page.items == ["c"]
    assert page.has_next is False
