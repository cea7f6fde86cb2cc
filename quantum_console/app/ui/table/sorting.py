from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from enum import Enum
from functools import cmp_to_key
from typing import Any, Callable, TypeVar

from quantum_console.app.ui.table.columns import Column

T = TypeVar("T")


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class SortState:
    key: str
    direction: SortDirection = SortDirection.ASC


def request_sort(current: SortState | None, key: str) -> SortState:
    """Next sort state after a click on ``key``.

    Unsorted and column switches start ascending; repeated clicks on the same
    column alternate between ascending and descending.
    """
    if current is not None and current.key == key and current.direction is SortDirection.ASC:
        return SortState(key=key, direction=SortDirection.DESC)
    return SortState(key=key, direction=SortDirection.ASC)


def collation_key(value: str) -> tuple[str, str]:
    # Accent and case differences only break ties.
    decomposed = unicodedata.normalize("NFKD", value)
    base = "".join(char for char in decomposed if not unicodedata.combining(char))
    return base.casefold(), value


def compare_values(left: Any, right: Any) -> int:
    if left is None or right is None:
        # Missing values sort first.
        return (left is not None) - (right is not None)
    if isinstance(left, str) and isinstance(right, str):
        left_key, right_key = collation_key(left), collation_key(right)
        return (left_key > right_key) - (left_key < right_key)
    return (left > right) - (left < right)


def build_comparator(column: Column[T], direction: SortDirection) -> Callable[[T, T], int]:
    sign = -1 if direction is SortDirection.DESC else 1

    def comparator(left: T, right: T) -> int:
        return sign * compare_values(column.read(left), column.read(right))

    return comparator


def sort_rows(rows: list[T], column: Column[T], direction: SortDirection) -> list[T]:
    return sorted(rows, key=cmp_to_key(build_comparator(column, direction)))
