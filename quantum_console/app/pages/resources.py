from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Protocol

from quantum_console.app.ui.listing_view import matches_query
from quantum_console.app.ui.pagination import PaginationMode
from quantum_console.app.ui.table.columns import Column, RowKey, field_column
from quantum_console.app.ui.table.sorting import SortDirection, SortState
from quantum_console.clients.quantum_sdk.modules.categories_client import CategoriesClient
from quantum_console.clients.quantum_sdk.modules.orders_client import OrdersClient
from quantum_console.clients.quantum_sdk.modules.products_client import ProductsClient
from quantum_console.clients.quantum_sdk.modules.reviews_client import ReviewsClient
from quantum_console.clients.quantum_sdk.modules.users_client import UsersClient

Row = dict[str, Any]


@dataclass(frozen=True)
class ListQuery:
    search: str = ""
    sort: SortState | None = None


@dataclass
class ListResult:
    rows: list[Row]
    total: int


class ResourceSource(Protocol):
    def fetch(self, query: ListQuery) -> ListResult: ...

    def delete(self, rows: list[Row]) -> int: ...


@dataclass(frozen=True)
class ResourceDefinition:
    name: str
    title: str
    columns: list[Column[Row]]
    key_extractor: Callable[[Row], RowKey]
    pagination_mode: PaginationMode
    search_keys: list[str] = field(default_factory=list)


def row_id(row: Row) -> RowKey:
    return row["id"]


def review_key(row: Row) -> RowKey:
    return f"{row['type']}:{row['id']}"


def actions_column() -> Column[Row]:
    return Column(id="actions", header="Actions", accessor=lambda row: "edit | delete", sortable=False)


PRODUCTS = ResourceDefinition(
    name="products",
    title="Products",
    columns=[
        field_column("id", "ID"),
        field_column("name", "Name"),
        field_column("category_name", "Category"),
        field_column("price", "Price"),
        actions_column(),
    ],
    key_extractor=row_id,
    pagination_mode=PaginationMode.EXTERNAL,
)

CATEGORIES = ResourceDefinition(
    name="categories",
    title="Categories",
    columns=[
        field_column("id", "ID"),
        field_column("name", "Name"),
        field_column("product_count", "Products"),
        actions_column(),
    ],
    key_extractor=row_id,
    pagination_mode=PaginationMode.INTERNAL,
)

USERS = ResourceDefinition(
    name="users",
    title="Users",
    columns=[
        field_column("id", "ID"),
        Column(
            id="name",
            header="Name",
            accessor=lambda row: f"{row.get('first_name', '')} {row.get('last_name', '')}".strip(),
            sortable=True,
        ),
        field_column("email", "Email"),
        field_column("role", "Role"),
        field_column("created_at", "Created"),
        actions_column(),
    ],
    key_extractor=row_id,
    pagination_mode=PaginationMode.EXTERNAL,
)

ORDERS = ResourceDefinition(
    name="orders",
    title="Orders",
    columns=[
        field_column("id", "ID"),
        field_column("customer_name", "Customer"),
        field_column("created_at", "Date"),
        field_column("status", "Status"),
        field_column("total", "Total"),
        actions_column(),
    ],
    key_extractor=row_id,
    pagination_mode=PaginationMode.INTERNAL,
    search_keys=["customer_name", "status"],
)

REVIEWS = ResourceDefinition(
    name="reviews",
    title="Reviews",
    columns=[
        field_column("type", "Type"),
        Column(id="author", header="Author", accessor=lambda row: (row.get("user") or {}).get("name"), sortable=True),
        field_column("product_name", "Product"),
        field_column("rating", "Rating"),
        field_column("comment", "Comment", sortable=False),
        field_column("created_at", "Date"),
        actions_column(),
    ],
    key_extractor=review_key,
    pagination_mode=PaginationMode.INTERNAL,
    search_keys=["comment", "product_name", "type"],
)

RESOURCES: dict[str, ResourceDefinition] = {
    definition.name: definition for definition in (PRODUCTS, CATEGORIES, USERS, ORDERS, REVIEWS)
}


def _sort_params(sort: SortState | None, allowed: set[str]) -> tuple[str | None, str | None]:
    if sort is None or sort.key not in allowed:
        return None, None
    return sort.key, "desc" if sort.direction is SortDirection.DESC else "asc"


class ProductsSource:
    _SERVER_SORTS = {"id", "name", "price"}

    def __init__(self, client: ProductsClient) -> None:
        self.client = client

    def fetch(self, query: ListQuery) -> ListResult:
        sort_by, sort_order = _sort_params(query.sort, self._SERVER_SORTS)
        result = self.client.list(
            search=query.search or None,
            sort_by=sort_by,
            sort_order=sort_order,
        )
        rows = result.get("products", [])
        return ListResult(rows=rows, total=(result.get("pagination") or {}).get("total", len(rows)))

    def delete(self, rows: list[Row]) -> int:
        result = self.client.bulk_delete([row["id"] for row in rows])
        return int(result.get("deleted", 0))


class UsersSource:
    def __init__(self, client: UsersClient) -> None:
        self.client = client

    def fetch(self, query: ListQuery) -> ListResult:
        result = self.client.list(search=query.search or None)
        rows = result.get("users", [])
        return ListResult(rows=rows, total=(result.get("pagination") or {}).get("total", len(rows)))

    def delete(self, rows: list[Row]) -> int:
        result = self.client.bulk_delete([row["id"] for row in rows])
        return int(result.get("deleted", 0))


class CategoriesSource:
    def __init__(self, client: CategoriesClient) -> None:
        self.client = client

    def fetch(self, query: ListQuery) -> ListResult:
        rows = self.client.list(search=query.search or None)
        return ListResult(rows=rows, total=len(rows))

    def delete(self, rows: list[Row]) -> int:
        for row in rows:
            self.client.delete(row["id"])
        return len(rows)


class OrdersSource:
    def __init__(self, client: OrdersClient) -> None:
        self.client = client

    def fetch(self, query: ListQuery) -> ListResult:
        rows = [row for row in self.client.list() if matches_query(row, query.search, ORDERS.search_keys)]
        return ListResult(rows=rows, total=len(rows))

    def delete(self, rows: list[Row]) -> int:
        for row in rows:
            self.client.delete(row["id"])
        return len(rows)


class ReviewsSource:
    def __init__(self, client: ReviewsClient) -> None:
        self.client = client

    def fetch(self, query: ListQuery) -> ListResult:
        rows = [row for row in self.client.list() if matches_query(row, query.search, REVIEWS.search_keys)]
        return ListResult(rows=rows, total=len(rows))

    def delete(self, rows: list[Row]) -> int:
        for row in rows:
            self.client.delete(row["type"], row["id"])
        return len(rows)
