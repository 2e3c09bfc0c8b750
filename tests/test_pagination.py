import pytest

from utils.pagination import (
    clamp_page, has_next, has_prev, page_slice, page_window, showing_range, total_pages,
)


@pytest.mark.parametrize("n, pages", [(0, 0), (1, 1), (3, 1), (4, 2), (6, 2), (7, 3), (31, 11)])
def test_total_pages_is_ceiling(n, pages):
    assert total_pages(n) == pages


@pytest.mark.parametrize("n", [1, 2, 3, 4, 5, 7, 10])
def test_last_page_holds_the_remainder(n):
    items = list(range(n))
    pages = total_pages(n)

    assert len(page_slice(items, pages)) == n - 3 * (pages - 1)
    assert page_slice(items, pages + 1) == []


def test_pages_cover_every_item_once():
    items = list(range(10))

    joined = [x for p in range(1, total_pages(10) + 1) for x in page_slice(items, p)]

    assert joined == items


def test_next_disabled_on_last_page():
    assert has_next(1, 2)
    assert not has_next(2, 2)
    assert not has_prev(1)
    assert has_prev(2)


def test_deleting_only_item_on_last_page_clamps_current_page():
    items = list(range(4))
    current = 2
    assert page_slice(items, current) == [3]

    items.pop()
    current = clamp_page(current, total_pages(len(items)))

    assert total_pages(len(items)) == 1
    assert current == 1


@pytest.mark.parametrize("page, pages, expected", [(5, 3, 3), (0, 3, 1), (2, 3, 2), (4, 0, 1)])
def test_clamp_page(page, pages, expected):
    assert clamp_page(page, pages) == expected


@pytest.mark.parametrize(
    "current, pages, expected",
    [
        (1, 3, [1, 2, 3]),
        (1, 10, [1, 2, 3, 4, 5]),
        (3, 10, [1, 2, 3, 4, 5]),
        (4, 10, [2, 3, 4, 5, 6]),
        (7, 10, [5, 6, 7, 8, 9]),
        (8, 10, [6, 7, 8, 9, 10]),
        (10, 10, [6, 7, 8, 9, 10]),
        (3, 5, [1, 2, 3, 4, 5]),
    ],
)
def test_page_window_slides(current, pages, expected):
    assert page_window(current, pages) == expected


def test_showing_range():
    assert showing_range(1, 7) == (1, 3)
    assert showing_range(3, 7) == (7, 7)
    assert showing_range(1, 0) == (0, 0)
