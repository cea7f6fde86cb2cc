from __future__ import annotations

from typing import Any

from quantum_console.clients.quantum_sdk.auth_store import AuthStore
from quantum_console.clients.quantum_sdk.http_client import HttpClient


class UsersClient:
    def __init__(self, http: HttpClient, auth_store: AuthStore) -> None:
        self.http = http
        self.auth_store = auth_store

    def list(
        self,
        *,
        search: str | None = None,
        role: str | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> dict[str, Any]:
        params = {"search": search, "role": role, "limit": limit, "offset": offset}
        return self.http.request("GET", "/users", token=self.auth_store.get_token(), params=params)

    def get(self, user_id: int) -> dict:
        result = self.http.request("GET", f"/users/{user_id}", token=self.auth_store.get_token())
        return result.get("user", {})

    def create(self, payload: dict[str, Any]) -> dict:
        result = self.http.request("POST", "/users", token=self.auth_store.get_token(), json=payload)
        return result.get("user", {})

    def update(self, user_id: int, payload: dict[str, Any]) -> dict:
        result = self.http.request("PUT", f"/users/{user_id}", token=self.auth_store.get_token(), json=payload)
        return result.get("user", {})

    def delete(self, user_id: int) -> dict:
        return self.http.request("DELETE", f"/users/{user_id}", token=self.auth_store.get_token())

    def bulk_delete(self, ids: list[int]) -> dict:
        return self.http.request("POST", "/users/bulk-delete", token=self.auth_store.get_token(), json={"ids": ids})
