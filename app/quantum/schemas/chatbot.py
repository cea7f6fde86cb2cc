from typing import Any, Literal

from pydantic import BaseModel, Field

AnswerType = Literal["text", "chart", "table"]


class ChatbotQuestion(BaseModel):
    question: str = Field(..., min_length=1, max_length=2000)


class ChatbotAnswer(BaseModel):
    type: AnswerType = "text"
    answer: str | None = None
    title: str | None = None
    headers: list[str] | None = None
    rows: list[list[Any]] | None = None
    chart: dict[str, Any] | None = None
    trace_id: str = ""
