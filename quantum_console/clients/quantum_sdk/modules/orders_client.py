from __future__ import annotations

from quantum_console.clients.quantum_sdk.auth_store import AuthStore
from quantum_console.clients.quantum_sdk.http_client import HttpClient


class OrdersClient:
    def __init__(self, http: HttpClient, auth_store: AuthStore) -> None:
        self.http = http
        self.auth_store = auth_store

    def list(self, status: str | None = None, user_id: int | None = None) -> list[dict]:
        result = self.http.request(
            "GET",
            "/orders",
            token=self.auth_store.get_token(),
            params={"status": status, "user_id": user_id},
        )
        return result.get("orders", [])

    def get(self, order_id: int) -> dict:
        result = self.http.request("GET", f"/orders/{order_id}", token=self.auth_store.get_token())
        return result.get("order", {})

    def update_status(self, order_id: int, status: str) -> dict:
        result = self.http.request(
            "PATCH",
            f"/orders/{order_id}/status",
            token=self.auth_store.get_token(),
            json={"status": status},
        )
        return result.get("order", {})

    def delete(self, order_id: int) -> dict:
        return self.http.request("DELETE", f"/orders/{order_id}", token=self.auth_store.get_token())
