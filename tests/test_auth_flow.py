from tests.api_helpers import DEFAULT_PASSWORD, auth_headers, create_user, login


def test_login_success(client, db_session):
    create_user(db_session, email="jane@example.com", role="dmj")

    response = client.post("/quantum/auth/login", json={"email": "jane@example.com", "password": DEFAULT_PASSWORD})

    assert response.status_code == 200
    payload = response.json()
    assert payload["access_token"]
    assert payload["token_type"] == "bearer"
    assert payload["user"]["email"] == "jane@example.com"
    assert payload["user"]["role"] == "dmj"
    assert "hashed_password" not in payload["user"]


def test_login_invalid_password(client, db_session):
    create_user(db_session, email="jane@example.com")

    response = client.post("/quantum/auth/login", json={"email": "jane@example.com", "password": "wrong-pass"})

    assert response.status_code == 401
    payload = response.json()
    assert payload["code"] == "INVALID_CREDENTIALS"
    assert payload["trace_id"]


def test_login_unknown_email(client):
    response = client.post("/quantum/auth/login", json={"email": "ghost@example.com", "password": "whatever1"})

    assert response.status_code == 401
    assert response.json()["code"] == "INVALID_CREDENTIALS"


def test_login_validation_error_envelope(client):
    response = client.post("/quantum/auth/login", json={"email": "not-an-email"})

    assert response.status_code == 422
    payload = response.json()
    assert payload["code"] == "VALIDATION_ERROR"
    fields = {error["field"] for error in payload["details"]["errors"]}
    assert {"email", "password"} <= fields


def test_current_user_requires_token(client):
    response = client.get("/quantum/users/current")

    assert response.status_code == 401
    assert response.json()["code"] == "INVALID_TOKEN"


def test_current_user_rejects_garbage_token(client):
    response = client.get("/quantum/users/current", headers=auth_headers("not-a-jwt"))

    assert response.status_code == 401
    assert response.json()["code"] == "INVALID_TOKEN"


def test_current_user_returns_profile(client, db_session):
    create_user(db_session, email="jane@example.com", first_name="Jane", last_name="Roe")
    token = login(client, "jane@example.com")

    response = client.get("/quantum/users/current", headers=auth_headers(token))

    assert response.status_code == 200
    assert response.json()["user"]["last_name"] == "Roe"


def test_oauth2_token_form(client, db_session):
    create_user(db_session, email="jane@example.com")

    response = client.post(
        "/quantum/auth/token",
        data={"username": "jane@example.com", "password": DEFAULT_PASSWORD},
    )

    assert response.status_code == 200
    assert response.json()["access_token"]
