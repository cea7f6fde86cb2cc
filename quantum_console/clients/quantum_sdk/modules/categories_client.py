from __future__ import annotations

from quantum_console.clients.quantum_sdk.auth_store import AuthStore
from quantum_console.clients.quantum_sdk.http_client import HttpClient


class CategoriesClient:
    def __init__(self, http: HttpClient, auth_store: AuthStore) -> None:
        self.http = http
        self.auth_store = auth_store

    def list(self, search: str | None = None) -> list[dict]:
        result = self.http.request("GET", "/categories", token=self.auth_store.get_token(), params={"search": search})
        return result.get("categories", [])

    def create(self, name: str) -> dict:
        result = self.http.request("POST", "/categories", token=self.auth_store.get_token(), json={"name": name})
        return result.get("category", {})

    def update(self, category_id: int, name: str) -> dict:
        result = self.http.request(
            "PUT",
            f"/categories/{category_id}",
            token=self.auth_store.get_token(),
            json={"name": name},
        )
        return result.get("category", {})

    def delete(self, category_id: int) -> dict:
        return self.http.request("DELETE", f"/categories/{category_id}", token=self.auth_store.get_token())
