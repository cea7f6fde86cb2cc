from quantum_console.clients.quantum_sdk.auth_store import AuthStore
from quantum_console.clients.quantum_sdk.http_client import HttpClient


class AuthClient:
    def __init__(self, http: HttpClient, auth_store: AuthStore) -> None:
        self.http = http
        self.auth_store = auth_store

    def login(self, email: str, password: str) -> dict:
        result = self.http.request("POST", "/auth/login", json={"email": email, "password": password})
        token = result.get("access_token")
        if token:
            self.auth_store.set_token(token, result.get("user"))
        return result

    def current_user(self) -> dict:
        result = self.http.request("GET", "/users/current", token=self.auth_store.get_token())
        return result.get("user", {})

    def logout(self) -> None:
        self.auth_store.clear()
