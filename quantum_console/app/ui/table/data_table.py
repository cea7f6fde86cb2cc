from __future__ import annotations

from typing import Any, Callable, Generic, Iterable, TypeVar

from quantum_console.app.ui.pagination import (
    PaginationMode,
    make_page_controller,
    page_window,
    slice_page,
    total_pages,
    visible_range,
)
from quantum_console.app.ui.table.columns import Column, RowKey, find_column, validate_columns
from quantum_console.app.ui.table.selection import SelectionTracker
from quantum_console.app.ui.table.sorting import SortDirection, SortState, request_sort, sort_rows

T = TypeVar("T")

EMPTY_MESSAGE = "No items found"
_UNSET: Any = object()


class DataTable(Generic[T]):
    """Headless table: sorting, paging and selection over caller-owned rows.

    The table never mutates ``data`` or ``columns``; everything it reports goes
    through the callbacks passed at construction.
    """

    def __init__(
        self,
        columns: list[Column[T]],
        data: Iterable[T],
        key_extractor: Callable[[T], RowKey],
        *,
        on_row_click: Callable[[T], None] | None = None,
        is_selectable: bool = False,
        selected_items: Iterable[T] | None = None,
        on_selected_items_change: Callable[[list[T]], None] | None = None,
        is_paginated: bool = False,
        items_per_page: int = 10,
        current_page: int = 1,
        total_items: int | None = None,
        on_page_change: Callable[[int], None] | None = None,
        pagination_mode: PaginationMode = PaginationMode.INTERNAL,
    ) -> None:
        if items_per_page <= 0:
            raise ValueError("items_per_page must be greater than 0")
        validate_columns(columns)
        self.columns = list(columns)
        self.key_extractor = key_extractor
        self.on_row_click = on_row_click
        self.is_selectable = is_selectable
        self.is_paginated = is_paginated
        self.items_per_page = items_per_page
        self.pagination_mode = pagination_mode
        self._data: list[T] = list(data)
        self._total_items = total_items
        self._sort: SortState | None = None
        self._pages = make_page_controller(pagination_mode, current_page, on_page_change)
        self._selection: SelectionTracker[T] = SelectionTracker(
            key_extractor,
            selected_items=selected_items,
            on_change=on_selected_items_change,
        )

    # -- state -----------------------------------------------------------------

    @property
    def data(self) -> list[T]:
        return list(self._data)

    @property
    def sort_state(self) -> SortState | None:
        return self._sort

    @property
    def selected_items(self) -> list[T]:
        return self._selection.items

    @property
    def total_items(self) -> int:
        if self._total_items is None:
            return len(self._data)
        return self._total_items

    @property
    def total_pages(self) -> int:
        return total_pages(self.total_items, self.items_per_page)

    @property
    def current_page(self) -> int:
        return self._pages.current_page

    @property
    def sorted_rows(self) -> list[T]:
        if self._sort is None:
            return list(self._data)
        column = find_column(self.columns, self._sort.key)
        if column is None:
            return list(self._data)
        return sort_rows(self._data, column, self._sort.direction)

    @property
    def visible_rows(self) -> list[T]:
        rows = self.sorted_rows
        if not self.is_paginated:
            return rows
        return slice_page(rows, self.current_page, self.items_per_page)

    @property
    def is_empty(self) -> bool:
        return not self.visible_rows

    @property
    def selection_scope(self) -> list[T]:
        if self.is_paginated and self.pagination_mode is PaginationMode.INTERNAL:
            return self.visible_rows
        return self.sorted_rows

    @property
    def select_all_checked(self) -> bool:
        return self._selection.all_selected(self.selection_scope)

    def is_row_selected(self, row: T) -> bool:
        return self._selection.is_selected(row)

    # -- sorting ---------------------------------------------------------------

    def request_sort(self, column_id: str) -> SortState | None:
        column = find_column(self.columns, column_id)
        if column is None or not column.sortable:
            return self._sort
        self._sort = request_sort(self._sort, column_id)
        return self._sort

    def click_header(self, column_id: str) -> SortState | None:
        return self.request_sort(column_id)

    def sort_indicator(self, column_id: str) -> str:
        if self._sort is None or self._sort.key != column_id:
            return ""
        return "^" if self._sort.direction is SortDirection.ASC else "v"

    # -- selection -------------------------------------------------------------

    def toggle_select_all(self) -> list[T]:
        if not self.is_selectable:
            return self._selection.items
        return self._selection.toggle_all(self.selection_scope)

    def toggle_row(self, row: T) -> list[T]:
        if not self.is_selectable:
            return self._selection.items
        return self._selection.toggle(row)

    def click_selection_cell(self, row: T) -> list[T]:
        return self.toggle_row(row)

    def click_row(self, row: T) -> None:
        if self.on_row_click is not None:
            self.on_row_click(row)

    # -- pagination ------------------------------------------------------------

    @property
    def show_pagination(self) -> bool:
        return self.is_paginated and self.total_pages > 1

    @property
    def page_buttons(self) -> list[int | str]:
        return page_window(self.current_page, self.total_pages)

    @property
    def footer_text(self) -> str:
        first, last = visible_range(self.current_page, self.items_per_page, self.total_items)
        return f"Showing {first} to {last} of {self.total_items} results"

    def go_to_page(self, page: int) -> bool:
        if not self.is_paginated:
            return False
        return self._pages.request_page(page, self.total_pages)

    def first_page(self) -> bool:
        return self.go_to_page(1)

    def previous_page(self) -> bool:
        return self.go_to_page(self.current_page - 1)

    def next_page(self) -> bool:
        return self.go_to_page(self.current_page + 1)

    def last_page(self) -> bool:
        return self.go_to_page(self.total_pages)

    # -- caller pushes ---------------------------------------------------------

    def update(
        self,
        *,
        data: Iterable[T] = _UNSET,
        selected_items: Iterable[T] = _UNSET,
        current_page: int = _UNSET,
        total_items: int | None = _UNSET,
    ) -> None:
        """Apply new props from the owner.

        A new ``selected_items`` replaces the selection silently. New ``data``
        drops selected rows that disappeared (notifying the owner) and keeps
        the internal page inside the new page range.
        """
        if total_items is not _UNSET:
            self._total_items = total_items
        if selected_items is not _UNSET:
            self._selection.sync(selected_items)
        if current_page is not _UNSET:
            self._pages.sync(current_page)
        if data is not _UNSET:
            self._data = list(data)
            self._selection.prune(self._data)
        self._pages.clamp(self.total_pages)
