from __future__ import annotations

from typing import Callable, Generic, Iterable, TypeVar

from quantum_console.app.ui.table.columns import RowKey

T = TypeVar("T")


class SelectionTracker(Generic[T]):
    """Ordered set of selected rows, compared by key rather than identity."""

    def __init__(
        self,
        key_extractor: Callable[[T], RowKey],
        selected_items: Iterable[T] | None = None,
        on_change: Callable[[list[T]], None] | None = None,
    ) -> None:
        self._key = key_extractor
        self._on_change = on_change
        self._items: list[T] = []
        self.sync(selected_items or [])

    @property
    def items(self) -> list[T]:
        return list(self._items)

    @property
    def keys(self) -> set[RowKey]:
        return {self._key(item) for item in self._items}

    def __len__(self) -> int:
        return len(self._items)

    def is_selected(self, row: T) -> bool:
        key = self._key(row)
        return any(self._key(item) == key for item in self._items)

    def sync(self, selected_items: Iterable[T]) -> None:
        # Caller-pushed snapshot; duplicates by key collapse to the first entry.
        deduped: list[T] = []
        seen: set[RowKey] = set()
        for item in selected_items:
            key = self._key(item)
            if key in seen:
                continue
            seen.add(key)
            deduped.append(item)
        self._items = deduped

    def toggle(self, row: T) -> list[T]:
        key = self._key(row)
        if self.is_selected(row):
            self._items = [item for item in self._items if self._key(item) != key]
        else:
            self._items = [*self._items, row]
        return self._notify()

    def all_selected(self, scope: list[T]) -> bool:
        if not scope:
            return False
        selected = self.keys
        return all(self._key(row) in selected for row in scope)

    def toggle_all(self, scope: list[T]) -> list[T]:
        if self.all_selected(scope):
            self._items = []
        else:
            self._items = list(scope)
        return self._notify()

    def clear(self) -> list[T]:
        self._items = []
        return self._notify()

    def prune(self, rows: Iterable[T]) -> bool:
        available = {self._key(row) for row in rows}
        kept = [item for item in self._items if self._key(item) in available]
        if len(kept) == len(self._items):
            return False
        self._items = kept
        self._notify()
        return True

    def _notify(self) -> list[T]:
        snapshot = list(self._items)
        if self._on_change is not None:
            self._on_change(snapshot)
        return snapshot
