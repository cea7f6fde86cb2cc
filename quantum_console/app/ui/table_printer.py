from __future__ import annotations

from typing import Any

from quantum_console.app.ui.listing_view import normalize_value
from quantum_console.app.ui.pagination import ELLIPSIS
from quantum_console.app.ui.table.data_table import EMPTY_MESSAGE, DataTable

CHECKED = "[x]"
UNCHECKED = "[ ]"


def _header_cells(table: DataTable[Any]) -> list[str]:
    cells = []
    if table.is_selectable:
        cells.append(CHECKED if table.select_all_checked else UNCHECKED)
    for column in table.columns:
        indicator = table.sort_indicator(column.id)
        cells.append(f"{column.header} {indicator}" if indicator else column.header)
    return cells


def _row_cells(table: DataTable[Any], row: Any) -> list[str]:
    cells = []
    if table.is_selectable:
        cells.append(CHECKED if table.is_row_selected(row) else UNCHECKED)
    cells.extend(normalize_value(column.read(row)) for column in table.columns)
    return cells


def render_navigation(table: DataTable[Any]) -> str:
    buttons = []
    for item in table.page_buttons:
        if item == ELLIPSIS:
            buttons.append(ELLIPSIS)
        elif item == table.current_page:
            buttons.append(f"[{item}]")
        else:
            buttons.append(str(item))
    return " ".join(["<<", "<", *buttons, ">", ">>"])


def render_table(table: DataTable[Any], title: str | None = None) -> str:
    header = _header_cells(table)
    body = [_row_cells(table, row) for row in table.visible_rows]

    widths = [len(cell) for cell in header]
    for cells in body:
        widths = [max(width, len(cell)) for width, cell in zip(widths, cells)]

    lines: list[str] = []
    if title:
        lines.append(title)
    lines.append(" | ".join(cell.ljust(widths[idx]) for idx, cell in enumerate(header)))
    lines.append("-+-".join("-" * width for width in widths))
    if not body:
        lines.append(EMPTY_MESSAGE)
    for cells in body:
        lines.append(" | ".join(cell.ljust(widths[idx]) for idx, cell in enumerate(cells)))

    if table.show_pagination:
        lines.append("")
        lines.append(table.footer_text)
        lines.append(render_navigation(table))
    return "\n".join(lines)


def print_table(table: DataTable[Any], title: str | None = None) -> None:
    print()
    print(render_table(table, title=title))
