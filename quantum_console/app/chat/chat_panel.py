from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from quantum_console.app.export.csv_exporter import export_rows
from quantum_console.app.infrastructure.errors.error_mapper import ErrorMapper
from quantum_console.app.infrastructure.logging.logger import get_logger, log_action
from quantum_console.app.ui.table.columns import Column
from quantum_console.app.ui.table.data_table import DataTable
from quantum_console.app.ui.table_printer import render_table
from quantum_console.clients.quantum_sdk.http_client import APIError
from quantum_console.clients.quantum_sdk.modules.chatbot_client import ChatbotClient

NO_CONTENT_MESSAGE = "Received a response, but no displayable content."
FAILURE_MESSAGE = "Something went wrong while talking to the assistant."
EXPORT_MODULE = "chatbot_table"

logger = get_logger("quantum_console.chat")


@dataclass
class ChatMessage:
    sender: str
    type: str
    content: str | None = None
    title: str | None = None
    headers: list[str] = field(default_factory=list)
    rows: list[list[Any]] = field(default_factory=list)
    chart: dict[str, Any] | None = None


def answer_table(headers: list[str], rows: list[list[Any]], items_per_page: int = 10) -> DataTable[tuple[int, list[Any]]]:
    """Wrap a tabular answer in a read-only, internally paginated table."""
    columns: list[Column[tuple[int, list[Any]]]] = [
        Column(
            id=f"col_{index}",
            header=header,
            accessor=lambda row, index=index: row[1][index] if index < len(row[1]) else None,
            sortable=True,
        )
        for index, header in enumerate(headers)
    ]
    return DataTable(
        columns,
        list(enumerate(rows)),
        key_extractor=lambda row: row[0],
        is_paginated=len(rows) > items_per_page,
        items_per_page=items_per_page,
    )


def table_records(headers: list[str], rows: list[list[Any]]) -> list[dict[str, Any]]:
    return [{header: row[index] if index < len(row) else None for index, header in enumerate(headers)} for row in rows]


def messages_from_answer(payload: dict[str, Any]) -> list[ChatMessage]:
    answer_type = payload.get("type") or "text"
    answer = payload.get("answer")
    title = payload.get("title")
    headers = payload.get("headers")
    rows = payload.get("rows")
    chart = payload.get("chart")

    messages: list[ChatMessage] = []
    if answer:
        messages.append(ChatMessage(sender="bot", type="text", content=answer))
    if answer_type == "table" and headers and rows is not None:
        messages.append(ChatMessage(sender="bot", type="table", title=title, headers=list(headers), rows=list(rows)))
        if chart:
            messages.append(ChatMessage(sender="bot", type="chart", title=title, chart=chart))
    elif answer_type == "chart" and chart:
        messages.append(ChatMessage(sender="bot", type="chart", title=title, chart=chart))
    if not messages:
        messages.append(ChatMessage(sender="bot", type="text", content=NO_CONTENT_MESSAGE))
    return messages


class ChatPanel:
    def __init__(self, client: ChatbotClient, *, export_dir: str = "out/exports") -> None:
        self.client = client
        self.export_dir = export_dir
        self.messages: list[ChatMessage] = []
        self.last_error: dict | None = None

    def ask(self, question: str) -> list[ChatMessage]:
        text = question.strip()
        if not text:
            return []
        self.messages.append(ChatMessage(sender="user", type="text", content=text))
        try:
            payload = self.client.ask(text)
        except APIError as error:
            self.last_error = ErrorMapper.to_payload(error)
            log_action(logger, "chatbot", "ask", self.client.auth_store.role, error.trace_id, "error", code=error.code)
            replies = [ChatMessage(sender="bot", type="text", content=FAILURE_MESSAGE)]
        else:
            self.last_error = None
            log_action(logger, "chatbot", "ask", self.client.auth_store.role, payload.get("trace_id"), "success")
            replies = messages_from_answer(payload)
        self.messages.extend(replies)
        return replies

    def export_table(self, message: ChatMessage) -> Path:
        """Write a table answer to CSV, one column per answer header."""
        if message.type != "table":
            raise ValueError("Only table answers can be exported")
        path = export_rows(
            module=EXPORT_MODULE,
            rows=table_records(message.headers, message.rows),
            headers=message.headers,
            output_dir=self.export_dir,
            filters={"title": message.title} if message.title else None,
        )
        log_action(logger, "chatbot", "export", self.client.auth_store.role, None, "success", rows=len(message.rows))
        return path

    def clear(self) -> None:
        self.messages = []
        self.last_error = None


def render_message(message: ChatMessage) -> str:
    prefix = "you" if message.sender == "user" else "bot"
    if message.type == "table":
        table = answer_table(message.headers, message.rows)
        return f"{prefix}>\n{render_table(table, title=message.title)}"
    if message.type == "chart":
        chart = message.chart or {}
        labels = (chart.get("data") or {}).get("labels") or []
        return f"{prefix}> [chart:{chart.get('type', 'unknown')}] {message.title or ''} ({len(labels)} points)".rstrip()
    return f"{prefix}> {message.content}"
