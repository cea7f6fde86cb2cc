import json
import logging
from types import SimpleNamespace

from starlette.requests import Request
from starlette.responses import Response

from app.quantum.middleware.observability import build_request_log_payload


def test_build_request_log_payload():
    scope = {
        "type": "http",
        "method": "GET",
        "path": "/quantum/products/7",
        "headers": [],
        "route": SimpleNamespace(path="/quantum/products/{product_id}"),
    }
    request = Request(scope)
    request.state.trace_id = "trace-1"
    request.state.error_code = "RESOURCE_NOT_FOUND"
    response = Response(status_code=404)

    payload = build_request_log_payload(request=request, response=response, latency_ms=12.3456)

    assert payload["trace_id"] == "trace-1"
    assert payload["route"] == "/quantum/products/{product_id}"
    assert payload["method"] == "GET"
    assert payload["status_code"] == 404
    assert payload["latency_ms"] == 12.35
    assert payload["error_code"] == "RESOURCE_NOT_FOUND"


def test_request_is_logged_as_json(client, caplog):
    with caplog.at_level(logging.INFO, logger="quantum.request"):
        client.get("/health", headers={"X-Trace-ID": "trace-log"})

    records = [json.loads(record.getMessage()) for record in caplog.records if record.name == "quantum.request"]
    assert records[-1]["trace_id"] == "trace-log"
    assert records[-1]["status_code"] == 200
