from app.quantum.middleware.trace import resolve_trace_id


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    payload = response.json()
    assert payload["status"] == "ok"
    assert payload["trace_id"]


def test_ready_checks_database(client):
    response = client.get("/ready")
    assert response.status_code == 200
    assert response.json()["status"] == "ready"


def test_trace_id_is_echoed(client):
    response = client.get("/health", headers={"X-Trace-ID": "trace-fixed"})
    assert response.headers["X-Trace-ID"] == "trace-fixed"
    assert response.json()["trace_id"] == "trace-fixed"


def test_unsafe_trace_id_is_replaced(client):
    response = client.get("/health", headers={"X-Trace-ID": "a/b" + "x" * 80})

    trace_id = response.headers["X-Trace-ID"]
    assert trace_id != "a/b" + "x" * 80
    assert len(trace_id) == 32
    assert response.json()["trace_id"] == trace_id


def test_resolve_trace_id_keeps_safe_values():
    assert resolve_trace_id("console-1234.retry:2") == "console-1234.retry:2"
    assert len(resolve_trace_id(None)) == 32
