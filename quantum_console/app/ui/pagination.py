from __future__ import annotations

import math
from enum import Enum
from typing import Callable, Sequence, TypeVar

T = TypeVar("T")

ELLIPSIS = "..."
WINDOW_RADIUS = 2


class PaginationMode(str, Enum):
    EXTERNAL = "external"
    INTERNAL = "internal"


def total_pages(total_items: int, page_size: int) -> int:
    if page_size <= 0:
        raise ValueError("page_size must be greater than 0")
    return max(1, math.ceil(max(0, total_items) / page_size))


def is_valid_page(page: int, pages: int) -> bool:
    return 1 <= page <= max(pages, 1)


def clamp_page(page: int, pages: int) -> int:
    return min(max(1, page), max(pages, 1))


def slice_page(rows: Sequence[T], page: int, page_size: int) -> list[T]:
    start = (page - 1) * page_size
    return list(rows[start : start + page_size])


def visible_range(page: int, page_size: int, total_items: int) -> tuple[int, int]:
    first = (page - 1) * page_size + 1
    last = min(page * page_size, total_items)
    return first, last


def page_window(current: int, pages: int, radius: int = WINDOW_RADIUS) -> list[int | str]:
    """Page buttons to show: first, last and ``current ± radius``.

    Pages exactly one step beyond the window become an ellipsis marker.
    """
    window: list[int | str] = []
    for number in range(1, pages + 1):
        if number == 1 or number == pages or abs(number - current) <= radius:
            window.append(number)
        elif abs(number - current) == radius + 1:
            window.append(ELLIPSIS)
    return window


class InternalPageController:
    mode = PaginationMode.INTERNAL

    def __init__(self, current_page: int = 1) -> None:
        self._page = max(1, current_page)

    @property
    def current_page(self) -> int:
        return self._page

    def sync(self, current_page: int) -> None:
        # Only the initial value is taken from the caller.
        return None

    def clamp(self, pages: int) -> None:
        self._page = clamp_page(self._page, pages)

    def request_page(self, page: int, pages: int) -> bool:
        if not is_valid_page(page, pages) or page == self._page:
            return False
        self._page = page
        return True


class ExternalPageController:
    mode = PaginationMode.EXTERNAL

    def __init__(self, current_page: int, on_page_change: Callable[[int], None]) -> None:
        self._page = max(1, current_page)
        self._on_page_change = on_page_change

    @property
    def current_page(self) -> int:
        return self._page

    def sync(self, current_page: int) -> None:
        self._page = max(1, current_page)

    def clamp(self, pages: int) -> None:
        return None

    def request_page(self, page: int, pages: int) -> bool:
        if not is_valid_page(page, pages):
            return False
        self._on_page_change(page)
        return True


PageController = InternalPageController | ExternalPageController


def make_page_controller(
    mode: PaginationMode,
    current_page: int = 1,
    on_page_change: Callable[[int], None] | None = None,
) -> PageController:
    if mode is PaginationMode.EXTERNAL:
        if on_page_change is None:
            raise ValueError("External pagination requires on_page_change")
        return ExternalPageController(current_page, on_page_change)
    return InternalPageController(current_page)
