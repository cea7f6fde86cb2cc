from __future__ import annotations

from typing import Any

from quantum_console.clients.quantum_sdk.auth_store import AuthStore
from quantum_console.clients.quantum_sdk.http_client import HttpClient


class ProductsClient:
    def __init__(self, http: HttpClient, auth_store: AuthStore) -> None:
        self.http = http
        self.auth_store = auth_store

    def list(
        self,
        *,
        search: str | None = None,
        category_id: int | None = None,
        sort_by: str | None = None,
        sort_order: str | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> dict[str, Any]:
        params = {
            "search": search,
            "category_id": category_id,
            "sort_by": sort_by,
            "sort_order": sort_order,
            "limit": limit,
            "offset": offset,
        }
        return self.http.request("GET", "/products", token=self.auth_store.get_token(), params=params)

    def get(self, product_id: int) -> dict:
        result = self.http.request("GET", f"/products/{product_id}", token=self.auth_store.get_token())
        return result.get("product", {})

    def create(self, payload: dict[str, Any]) -> dict:
        result = self.http.request("POST", "/products", token=self.auth_store.get_token(), json=payload)
        return result.get("product", {})

    def update(self, product_id: int, payload: dict[str, Any]) -> dict:
        result = self.http.request("PUT", f"/products/{product_id}", token=self.auth_store.get_token(), json=payload)
        return result.get("product", {})

    def delete(self, product_id: int) -> dict:
        return self.http.request("DELETE", f"/products/{product_id}", token=self.auth_store.get_token())

    def bulk_delete(self, ids: list[int]) -> dict:
        return self.http.request("POST", "/products/bulk-delete", token=self.auth_store.get_token(), json={"ids": ids})
