from quantum_console.clients.quantum_sdk.auth_store import AuthStore
from quantum_console.clients.quantum_sdk.http_client import HttpClient


class ChatbotClient:
    def __init__(self, http: HttpClient, auth_store: AuthStore) -> None:
        self.http = http
        self.auth_store = auth_store

    def ask(self, question: str) -> dict:
        return self.http.request("POST", "/chatbot", token=self.auth_store.get_token(), json={"question": question})
