"""Client-side paging over an in-memory list.

Pages are 1-based. Everything here is pure so list panels can recompute a
page without refetching.
"""
import math
from typing import Sequence, TypeVar

from utils.constants import PAGE_SIZE, PAGE_WINDOW

T = TypeVar("T")


def total_pages(item_count: int, page_size: int = PAGE_SIZE) -> int:
    if item_count <= 0:
        return 0
    return math.ceil(item_count / page_size)


def clamp_page(page: int, pages: int) -> int:
    """Keep page inside [1, pages]; an empty list stays on page 1."""
    if pages <= 0:
        return 1
    return max(1, min(page, pages))


def page_slice(items: Sequence[T], page: int, page_size: int = PAGE_SIZE) -> list[T]:
    start = (page - 1) * page_size
    return list(items[start:start + page_size])


def page_window(current: int, pages: int, width: int = PAGE_WINDOW) -> list[int]:
    """Page numbers for the button strip: at most `width`, centred on current.

    Near the start the first `width` pages are shown, near the end the last
    `width`.
    """
    if pages <= width:
        return list(range(1, pages + 1))
    half = width // 2
    if current <= half + 1:
        first = 1
    elif current >= pages - half:
        first = pages - width + 1
    else:
        first = current - half
    return list(range(first, first + width))


def has_prev(current: int) -> bool:
    return current > 1


def has_next(current: int, pages: int) -> bool:
    return current < pages


def showing_range(current: int, item_count: int, page_size: int = PAGE_SIZE) -> tuple[int, int]:
    """1-based (first, last) item numbers visible on the current page."""
    if item_count <= 0:
        return 0, 0
    first = (current - 1) * page_size + 1
    return first, min(current * page_size, item_count)
