from __future__ import annotations

import logging
from typing import Any

import httpx

from app.quantum.core.config import settings
from app.quantum.core.error_catalog import AppError, ErrorCatalog

logger = logging.getLogger("quantum.chatbot")

_ANSWER_TYPES = {"text", "chart", "table"}


def normalize_answer(payload: Any) -> dict[str, Any]:
    if not isinstance(payload, dict):
        return {"type": "text", "answer": str(payload)}

    answer_type = str(payload.get("type") or "text").lower()
    if answer_type not in _ANSWER_TYPES:
        answer_type = "text"

    headers = payload.get("headers")
    rows = payload.get("rows")
    chart = payload.get("chart")
    if answer_type == "table" and not (isinstance(headers, list) and isinstance(rows, list)):
        answer_type = "text"
    if answer_type == "chart" and not isinstance(chart, dict):
        answer_type = "text"

    answer = payload.get("answer")
    if answer is None and answer_type == "text":
        answer = payload.get("message") or ""

    return {
        "type": answer_type,
        "answer": answer,
        "title": payload.get("title"),
        "headers": [str(header) for header in headers] if answer_type == "table" else None,
        "rows": [list(row) if isinstance(row, (list, tuple)) else [row] for row in rows] if answer_type == "table" else None,
        "chart": chart if answer_type in {"chart", "table"} and isinstance(chart, dict) else None,
    }


class ChatbotService:
    def __init__(
        self,
        url: str | None = None,
        timeout_seconds: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.url = url or settings.CHATBOT_URL
        self.timeout_seconds = timeout_seconds or settings.CHATBOT_TIMEOUT_SECONDS
        self.transport = transport

    async def ask(self, question: str, *, user_email: str | None, token: str | None) -> dict[str, Any]:
        headers = {"Content-Type": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        try:
            async with httpx.AsyncClient(timeout=self.timeout_seconds, transport=self.transport) as client:
                response = await client.post(self.url, json={"question": question, "user": user_email}, headers=headers)
        except httpx.HTTPError as exc:
            logger.warning("Chatbot request failed: %s", exc)
            raise AppError(ErrorCatalog.CHATBOT_UNAVAILABLE, details={"type": exc.__class__.__name__}) from exc

        if response.status_code >= 400:
            raise AppError(ErrorCatalog.CHATBOT_UNAVAILABLE, details={"upstream_status": response.status_code})
        try:
            payload = response.json()
        except ValueError:
            payload = response.text
        return normalize_answer(payload)


def get_chatbot_service() -> ChatbotService:
    return ChatbotService()
