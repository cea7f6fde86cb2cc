from __future__ import annotations

from quantum_console.clients.quantum_sdk.auth_store import AuthStore
from quantum_console.clients.quantum_sdk.http_client import HttpClient


class ReviewsClient:
    def __init__(self, http: HttpClient, auth_store: AuthStore) -> None:
        self.http = http
        self.auth_store = auth_store

    def list(self, review_type: str | None = None, rating: int | None = None) -> list[dict]:
        result = self.http.request(
            "GET",
            "/reviews",
            token=self.auth_store.get_token(),
            params={"type": review_type, "rating": rating},
        )
        return result.get("reviews", [])

    def create(self, review_type: str, rating: int, comment: str, product_id: int | None = None) -> dict:
        payload = {"type": review_type, "rating": rating, "comment": comment, "product_id": product_id}
        result = self.http.request("POST", "/reviews", token=self.auth_store.get_token(), json=payload)
        return result.get("review", {})

    def update(self, review_type: str, review_id: int, rating: int, comment: str) -> dict:
        result = self.http.request(
            "PUT",
            f"/reviews/{review_type}/{review_id}",
            token=self.auth_store.get_token(),
            json={"rating": rating, "comment": comment},
        )
        return result.get("review", {})

    def delete(self, review_type: str, review_id: int) -> dict:
        return self.http.request("DELETE", f"/reviews/{review_type}/{review_id}", token=self.auth_store.get_token())
