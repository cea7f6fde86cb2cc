import asyncio
import inspect
import json

import httpx

from app.quantum.services.chatbot import ChatbotService, get_chatbot_service, normalize_answer
from quantum_console.app.chat.chat_panel import messages_from_answer
from tests.api_helpers import staff_headers


def _override(client, handler):
    service = ChatbotService(url="http://chatbot.test/chat", timeout_seconds=1, transport=httpx.MockTransport(handler))
    client.app.dependency_overrides[get_chatbot_service] = lambda: service


def test_chatbot_forwards_question_and_token(client, db_session):
    headers = staff_headers(client, db_session)
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["body"] = json.loads(request.content)
        seen["auth"] = request.headers.get("Authorization")
        return httpx.Response(
            200,
            json={"type": "table", "answer": "Top products", "headers": ["name", "sold"], "rows": [["Mic", 4]]},
        )

    _override(client, handler)
    response = client.post("/quantum/chatbot", json={"question": " top products? "}, headers=headers)

    assert response.status_code == 200
    payload = response.json()
    assert payload["type"] == "table"
    assert payload["rows"] == [["Mic", 4]]
    assert seen["body"] == {"question": "top products?", "user": "staff@example.com"}
    assert seen["auth"] == headers["Authorization"]


def test_chatbot_upstream_failure_is_bad_gateway(client, db_session):
    headers = staff_headers(client, db_session)
    _override(client, lambda request: httpx.Response(500, text="boom"))

    response = client.post("/quantum/chatbot", json={"question": "hello"}, headers=headers)

    assert response.status_code == 502
    assert response.json()["code"] == "CHATBOT_UNAVAILABLE"


def test_chatbot_network_error_is_bad_gateway(client, db_session):
    headers = staff_headers(client, db_session)

    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    _override(client, handler)
    response = client.post("/quantum/chatbot", json={"question": "hello"}, headers=headers)

    assert response.status_code == 502
    assert response.json()["details"]["type"] == "ConnectError"


def test_normalize_answer_falls_back_to_text():
    assert normalize_answer({"type": "table", "answer": "no rows"})["type"] == "text"
    assert normalize_answer({"type": "chart", "answer": "no chart"})["type"] == "text"
    assert normalize_answer("plain")["answer"] == "plain"
    chart = normalize_answer({"type": "chart", "chart": {"type": "bar", "data": {}}})
    assert chart["chart"] == {"type": "bar", "data": {}}


def test_chatbot_table_answer_keeps_chart(client, db_session):
    headers = staff_headers(client, db_session)
    chart = {"type": "bar", "data": {"labels": ["Mic", "Amp"], "datasets": [{"data": [4, 2]}]}}
    _override(
        client,
        lambda request: httpx.Response(
            200,
            json={"type": "table", "title": "Sales", "headers": ["name", "sold"], "rows": [["Mic", 4], ["Amp", 2]], "chart": chart},
        ),
    )

    response = client.post("/quantum/chatbot", json={"question": "sales"}, headers=headers)

    assert response.status_code == 200
    payload = response.json()
    assert payload["type"] == "table"
    assert payload["chart"] == chart
    assert [message.type for message in messages_from_answer(payload)] == ["table", "chart"]


def test_normalize_answer_drops_non_dict_chart_on_table():
    answer = normalize_answer({"type": "table", "headers": ["a"], "rows": [[1]], "chart": "bar"})

    assert answer["type"] == "table"
    assert answer["chart"] is None


def test_chatbot_service_does_not_block_event_loop():
    assert inspect.iscoroutinefunction(ChatbotService.ask)


def test_chatbot_service_awaits_upstream():
    service = ChatbotService(
        url="http://chatbot.test/chat",
        timeout_seconds=1,
        transport=httpx.MockTransport(lambda request: httpx.Response(200, json={"type": "text", "answer": "hi"})),
    )

    answer = asyncio.run(service.ask("hello", user_email=None, token=None))

    assert answer["answer"] == "hi"
