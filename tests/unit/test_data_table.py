import pytest

from quantum_console.app.ui.pagination import PaginationMode
from quantum_console.app.ui.table.columns import Column, field_column
from quantum_console.app.ui.table.data_table import DataTable
from quantum_console.app.ui.table.sorting import SortDirection, SortState


def _rows(count: int) -> list[dict]:
    return [{"id": index, "name": f"Item {index:02d}"} for index in range(1, count + 1)]


def _columns() -> list[Column[dict]]:
    return [
        field_column("id", "ID"),
        field_column("name", "Name"),
        Column(id="actions", header="Actions", accessor=lambda row: "edit", sortable=False),
    ]


def _ids(rows: list[dict]) -> list[int]:
    return [row["id"] for row in rows]


class Recorder:
    def __init__(self) -> None:
        self.selections: list[list[dict]] = []
        self.pages: list[int] = []
        self.clicks: list[dict] = []


def _table(rows=None, *, mode=PaginationMode.INTERNAL, **kwargs) -> tuple[DataTable[dict], Recorder]:
    recorder = Recorder()
    options = {
        "on_row_click": recorder.clicks.append,
        "is_selectable": True,
        "on_selected_items_change": recorder.selections.append,
        "is_paginated": True,
        "items_per_page": 10,
        "pagination_mode": mode,
    }
    if mode is PaginationMode.EXTERNAL:
        options["on_page_change"] = recorder.pages.append
    options.update(kwargs)
    table = DataTable(_columns(), _rows(25) if rows is None else rows, lambda row: row["id"], **options)
    return table, recorder


def test_twenty_five_rows_ten_per_page() -> None:
    table, _ = _table()

    assert table.total_pages == 3
    assert _ids(table.visible_rows) == list(range(1, 11))
    assert table.page_buttons == [1, 2, 3]

    assert table.next_page() is True
    assert _ids(table.visible_rows) == list(range(11, 21))
    assert table.footer_text == "Showing 11 to 20 of 25 results"

    assert table.last_page() is True
    assert _ids(table.visible_rows) == list(range(21, 26))
    assert table.footer_text == "Showing 21 to 25 of 25 results"
    assert table.next_page() is False
    assert table.current_page == 3

    assert table.first_page() is True
    assert table.previous_page() is False
    assert table.go_to_page(4) is False
    assert table.current_page == 1


def test_select_all_over_five_rows() -> None:
    table, recorder = _table(_rows(5))

    table.toggle_select_all()

    assert _ids(recorder.selections[-1]) == [1, 2, 3, 4, 5]
    assert table.select_all_checked is True

    table.toggle_select_all()

    assert recorder.selections[-1] == []
    assert table.select_all_checked is False


def test_click_on_non_sortable_header_is_ignored() -> None:
    table, _ = _table()
    before = _ids(table.visible_rows)

    assert table.click_header("actions") is None
    assert table.click_header("unknown") is None

    assert table.sort_state is None
    assert _ids(table.visible_rows) == before


def test_sort_applies_before_slicing() -> None:
    table, _ = _table()

    table.click_header("id")
    table.click_header("id")

    assert table.sort_state == SortState("id", SortDirection.DESC)
    assert _ids(table.visible_rows) == list(range(25, 15, -1))
    assert table.sort_indicator("id") == "v"
    assert table.sort_indicator("name") == ""

    table.click_header("name")
    assert table.sort_state == SortState("name", SortDirection.ASC)
    assert _ids(table.visible_rows) == list(range(1, 11))


def test_internal_select_all_scope_is_current_page() -> None:
    table, recorder = _table()
    table.go_to_page(2)
    table.toggle_row(_rows(25)[14])
    table.first_page()

    table.toggle_select_all()

    assert _ids(recorder.selections[-1]) == list(range(1, 11))
    assert table.select_all_checked is True


def test_select_all_clears_rows_outside_scope_when_page_fully_selected() -> None:
    rows = _rows(25)
    table, recorder = _table(rows, selected_items=[*rows[:10], rows[14]])

    assert table.select_all_checked is True
    table.toggle_select_all()

    assert recorder.selections[-1] == []


def test_external_mode_reports_page_requests_and_uses_caller_page() -> None:
    table, recorder = _table(mode=PaginationMode.EXTERNAL)

    assert table.next_page() is True
    assert recorder.pages == [2]
    assert table.current_page == 1
    assert _ids(table.visible_rows) == list(range(1, 11))

    table.update(current_page=2)

    assert table.current_page == 2
    assert _ids(table.visible_rows) == list(range(11, 21))
    assert table.go_to_page(9) is False
    assert recorder.pages == [2]


def test_external_select_all_scope_is_whole_data() -> None:
    table, recorder = _table(mode=PaginationMode.EXTERNAL)

    table.toggle_select_all()

    assert len(recorder.selections[-1]) == 25


def test_external_mode_requires_page_callback() -> None:
    with pytest.raises(ValueError):
        DataTable(_columns(), _rows(3), lambda row: row["id"], is_paginated=True, pagination_mode=PaginationMode.EXTERNAL)


def test_items_per_page_must_be_positive() -> None:
    with pytest.raises(ValueError):
        DataTable(_columns(), _rows(3), lambda row: row["id"], items_per_page=0)


def test_row_click_and_selection_cell_are_separate() -> None:
    table, recorder = _table(_rows(3))
    row = table.visible_rows[1]

    table.click_row(row)
    table.click_selection_cell(row)

    assert recorder.clicks == [row]
    assert recorder.selections == [[row]]
    assert table.is_row_selected(row)


def test_new_data_prunes_stale_selection() -> None:
    rows = _rows(5)
    table, recorder = _table(rows, selected_items=[rows[1], rows[2]])

    table.update(data=rows)
    assert recorder.selections == []

    table.update(data=[row for row in rows if row["id"] != 3])
    assert _ids(recorder.selections[-1]) == [2]
    assert _ids(table.selected_items) == [2]


def test_pushed_selection_replaces_without_callback() -> None:
    rows = _rows(5)
    table, recorder = _table(rows)

    table.update(selected_items=[rows[0]])

    assert _ids(table.selected_items) == [1]
    assert recorder.selections == []


def test_new_data_keeps_sort_and_clamps_internal_page() -> None:
    table, _ = _table()
    table.click_header("name")
    table.last_page()

    table.update(data=_rows(12))

    assert table.current_page == 2
    assert table.sort_state == SortState("name", SortDirection.ASC)
    assert _ids(table.visible_rows) == [11, 12]

    table.update(data=[])
    assert table.current_page == 1
    assert table.total_pages == 1
    assert table.is_empty


def test_total_items_override_drives_page_count() -> None:
    table, _ = _table(_rows(10), mode=PaginationMode.EXTERNAL, total_items=42)

    assert table.total_pages == 5
    assert table.footer_text == "Showing 1 to 10 of 42 results"


def test_page_beyond_supplied_rows_is_empty() -> None:
    table, recorder = _table(_rows(10), mode=PaginationMode.EXTERNAL, total_items=42)

    assert table.go_to_page(3) is True
    assert recorder.pages == [3]
    assert table.current_page == 1

    table.update(current_page=3)

    assert table.current_page == 3
    assert table.visible_rows == []
    assert table.is_empty
    assert table.footer_text == "Showing 21 to 30 of 42 results"


def test_empty_table_state() -> None:
    table, recorder = _table([])

    assert table.visible_rows == []
    assert table.total_pages == 1
    assert table.select_all_checked is False
    assert table.show_pagination is False
    table.toggle_select_all()
    assert recorder.selections == [[]]


def test_unselectable_table_ignores_selection_requests() -> None:
    table, recorder = _table(_rows(3), is_selectable=False)

    table.toggle_row(table.visible_rows[0])
    table.toggle_select_all()

    assert recorder.selections == []
    assert table.selected_items == []


def test_unpaginated_table_shows_everything() -> None:
    table, _ = _table(is_paginated=False)

    assert len(table.visible_rows) == 25
    assert table.next_page() is False
    assert table.show_pagination is False
