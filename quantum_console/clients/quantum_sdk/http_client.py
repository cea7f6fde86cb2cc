import time
import uuid
from dataclasses import dataclass
from typing import Any, Callable

import httpx

from quantum_console.clients.quantum_sdk.auth_store import AuthStore

TRACE_HEADER = "X-Trace-ID"
RETRYABLE_STATUSES = frozenset({502, 503, 504})


@dataclass
class APIError(Exception):
    code: str
    message: str
    details: dict[str, Any] | None = None
    trace_id: str | None = None
    status_code: int | None = None

    @property
    def session_expired(self) -> bool:
        return self.status_code == 401

    @property
    def field_errors(self) -> dict[str, str]:
        """Validation messages keyed by field, from a ``VALIDATION_ERROR`` envelope."""
        errors = (self.details or {}).get("errors") or []
        return {
            str(error["field"]): str(error.get("message", ""))
            for error in errors
            if isinstance(error, dict) and error.get("field")
        }


class HttpClient:
    """Transport for the Quantum API.

    Every call carries a trace id that is reused across retries, so the API log
    lines of one logical request share it. When a token-bearing call is refused
    with 401 the attached ``AuthStore`` is cleared.
    """

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 20,
        verify_ssl: bool = True,
        retry_max_attempts: int = 3,
        retry_backoff_ms: int = 150,
        transport: Callable[..., httpx.Response] | None = None,
        auth_store: AuthStore | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self.verify_ssl = verify_ssl
        self.retry_max_attempts = max(1, retry_max_attempts)
        self.retry_backoff_ms = max(0, retry_backoff_ms)
        self.transport = transport or httpx.request
        self.auth_store = auth_store

    def request(self, method: str, path: str, token: str | None = None, **kwargs: Any) -> dict[str, Any]:
        headers = dict(kwargs.pop("headers", None) or {})
        trace_id = headers.setdefault(TRACE_HEADER, uuid.uuid4().hex)
        if token:
            headers["Authorization"] = f"Bearer {token}"
        if kwargs.get("params"):
            kwargs["params"] = {key: value for key, value in kwargs["params"].items() if value is not None}
        url = f"{self.base_url}{path}"
        retryable = method.upper() == "GET"

        attempt = 1
        while True:
            try:
                response = self.transport(
                    method,
                    url,
                    timeout=self.timeout_seconds,
                    verify=self.verify_ssl,
                    headers=headers,
                    **kwargs,
                )
            except httpx.TimeoutException as exc:
                error = APIError(
                    code="TIMEOUT_ERROR",
                    message="The request timed out. Check your network and try again.",
                    trace_id=trace_id,
                )
                if not self._can_retry(retryable, attempt):
                    raise error from exc
            except httpx.TransportError as exc:
                error = APIError(code="NETWORK_ERROR", message="Could not reach the Quantum API.", trace_id=trace_id)
                if not self._can_retry(retryable, attempt):
                    raise error from exc
            else:
                if response.status_code < 400:
                    return self._safe_json(response)
                error = self._error_from_response(response, trace_id)
                if error.session_expired and token:
                    self._expire_session()
                    raise error
                if response.status_code not in RETRYABLE_STATUSES or not self._can_retry(retryable, attempt):
                    raise error
            self._backoff(attempt)
            attempt += 1

    def _can_retry(self, retryable: bool, attempt: int) -> bool:
        return retryable and attempt < self.retry_max_attempts

    def _expire_session(self) -> None:
        if self.auth_store is not None:
            self.auth_store.clear()

    def _backoff(self, attempt: int) -> None:
        time.sleep((self.retry_backoff_ms * attempt) / 1000)

    def _error_from_response(self, response: httpx.Response, trace_id: str) -> APIError:
        payload = self._safe_json(response)
        details = payload.get("details")
        return APIError(
            code=payload.get("code", "HTTP_ERROR"),
            message=payload.get("message", response.text),
            details=details if isinstance(details, dict) else None,
            trace_id=payload.get("trace_id") or response.headers.get(TRACE_HEADER) or trace_id,
            status_code=response.status_code,
        )

    @staticmethod
    def _safe_json(response: httpx.Response) -> dict[str, Any]:
        try:
            payload = response.json()
        except ValueError:
            return {"message": response.text}
        return payload if isinstance(payload, dict) else {"items": payload}
