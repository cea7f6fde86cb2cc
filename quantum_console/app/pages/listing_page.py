from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, TypeVar

from quantum_console.app.export.csv_exporter import export_rows
from quantum_console.app.infrastructure.errors.error_mapper import ErrorMapper
from quantum_console.app.infrastructure.logging.logger import get_logger, log_action
from quantum_console.app.pages.resources import ListQuery, ResourceDefinition, ResourceSource, Row
from quantum_console.app.ui.pagination import PaginationMode, clamp_page, total_pages
from quantum_console.app.ui.table.data_table import DataTable
from quantum_console.clients.quantum_sdk.auth_store import AuthStore
from quantum_console.clients.quantum_sdk.http_client import APIError

R = TypeVar("R")

logger = get_logger("quantum_console.listing")


@dataclass(frozen=True)
class Toast:
    level: str
    message: str
    trace_id: str | None = None


@dataclass
class ToastCenter:
    toasts: list[Toast] = field(default_factory=list)

    def push(self, level: str, message: str, trace_id: str | None = None) -> Toast:
        toast = Toast(level=level, message=message, trace_id=trace_id)
        self.toasts.append(toast)
        return toast

    def success(self, message: str) -> Toast:
        return self.push("success", message)

    def warning(self, message: str) -> Toast:
        return self.push("warning", message)

    def error(self, error: Exception) -> Toast:
        payload = ErrorMapper.to_payload(error)
        return self.push("error", f"{payload['message']} {payload['suggestion']}", trace_id=payload["trace_id"])

    def drain(self) -> list[Toast]:
        drained, self.toasts = self.toasts, []
        return drained


class ListingPage:
    """One admin listing: fetches rows for a resource and drives its table."""

    def __init__(
        self,
        resource: ResourceDefinition,
        source: ResourceSource,
        auth_store: AuthStore,
        *,
        items_per_page: int = 10,
        export_dir: str = "out/exports",
        toasts: ToastCenter | None = None,
        on_row_click: Callable[[Row], None] | None = None,
    ) -> None:
        self.resource = resource
        self.source = source
        self.auth_store = auth_store
        self.export_dir = export_dir
        self.toasts = toasts or ToastCenter()
        self.search = ""
        self.selected: list[Row] = []
        self.redirect_to_login = False
        self._page = 1
        external = resource.pagination_mode is PaginationMode.EXTERNAL
        self.table: DataTable[Row] = DataTable(
            resource.columns,
            [],
            resource.key_extractor,
            on_row_click=on_row_click,
            is_selectable=True,
            selected_items=self.selected,
            on_selected_items_change=self._on_selection_change,
            is_paginated=True,
            items_per_page=items_per_page,
            current_page=self._page,
            on_page_change=self._on_page_change if external else None,
            pagination_mode=resource.pagination_mode,
        )

    @property
    def is_external(self) -> bool:
        return self.resource.pagination_mode is PaginationMode.EXTERNAL

    def _on_selection_change(self, items: list[Row]) -> None:
        self.selected = items

    def _query(self) -> ListQuery:
        return ListQuery(search=self.search, sort=self.table.sort_state)

    def _guard(self, action: str, operation: Callable[[], R]) -> R | None:
        try:
            result = operation()
        except APIError as error:
            if ErrorMapper.requires_login(error):
                self.auth_store.clear()
                self.redirect_to_login = True
            self.toasts.error(error)
            log_action(logger, self.resource.name, action, self.auth_store.role, error.trace_id, "error", code=error.code)
            return None
        log_action(logger, self.resource.name, action, self.auth_store.role, None, "success")
        return result

    def load(self) -> bool:
        result = self._guard("list", lambda: self.source.fetch(self._query()))
        if result is None:
            return False
        if self.is_external:
            self._page = clamp_page(self._page, total_pages(result.total, self.table.items_per_page))
            self.table.update(data=result.rows, current_page=self._page)
        else:
            self.table.update(data=result.rows)
        return True

    def _on_page_change(self, page: int) -> None:
        self._page = page
        self.table.update(current_page=page)

    def go_to_page(self, page: int) -> bool:
        return self.table.go_to_page(page)

    def set_search(self, query: str) -> bool:
        self.search = query.strip()
        self._page = 1
        loaded = self.load()
        if loaded and not self.is_external:
            self.table.first_page()
        return loaded

    def sort(self, column_id: str) -> None:
        self.table.request_sort(column_id)

    def toggle_row(self, row: Row) -> None:
        self.table.toggle_row(row)

    def toggle_select_all(self) -> None:
        self.table.toggle_select_all()

    def delete_selected(self) -> int:
        if not self.selected:
            self.toasts.warning("Select at least one row to delete.")
            return 0
        rows = list(self.selected)
        deleted = self._guard("bulk_delete", lambda: self.source.delete(rows))
        if deleted is None:
            return 0
        self.table.update(selected_items=[])
        self.selected = []
        self.load()
        self.toasts.success(f"{deleted} {self.resource.name} deleted.")
        return deleted

    def export_rows(self) -> Path | None:
        rows: list[dict[str, Any]] = list(self.selected) or self.table.sorted_rows
        if not rows:
            self.toasts.warning("Nothing to export.")
            return None
        path = export_rows(
            module=self.resource.name,
            rows=rows,
            output_dir=self.export_dir,
            filters={"search": self.search} if self.search else None,
        )
        log_action(logger, self.resource.name, "export", self.auth_store.role, None, "success", rows=len(rows))
        self.toasts.success(f"Exported {len(rows)} rows to {path}")
        return path
