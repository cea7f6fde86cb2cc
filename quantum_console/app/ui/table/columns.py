from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")
RowKey = str | int


@dataclass(frozen=True)
class Column(Generic[T]):
    """One renderable field of a table row.

    ``accessor`` must be pure: it may only look at the row, never at table state.
    Sortable columns must yield homogeneously typed ``str`` or numeric values.
    """

    id: str
    header: str
    accessor: Callable[[T], Any]
    sortable: bool = False

    def read(self, row: T) -> Any:
        return self.accessor(row)


def field_column(key: str, header: str, *, sortable: bool = True) -> Column[dict[str, Any]]:
    return Column(id=key, header=header, accessor=lambda row: row.get(key), sortable=sortable)


def find_column(columns: list[Column[T]], column_id: str) -> Column[T] | None:
    for column in columns:
        if column.id == column_id:
            return column
    return None


def validate_columns(columns: list[Column[T]]) -> None:
    seen: set[str] = set()
    for column in columns:
        if column.id in seen:
            raise ValueError(f"Duplicate column id: {column.id}")
        seen.add(column.id)
