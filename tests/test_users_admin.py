from tests.api_helpers import auth_headers, create_user, login, staff_headers


def _user_payload(**overrides):
    payload = {
        "first_name": "Ada",
        "last_name": "Lovelace",
        "email": "ada@example.com",
        "role": "dmj",
        "password": "LongEnough1",
    }
    payload.update(overrides)
    return payload


def test_create_user_and_login_with_new_password(client, db_session):
    headers = staff_headers(client, db_session)

    response = client.post("/quantum/users", json=_user_payload(), headers=headers)

    assert response.status_code == 201
    assert response.json()["user"]["role"] == "dmj"
    assert login(client, "ada@example.com", "LongEnough1")


def test_create_user_rejects_short_password(client, db_session):
    headers = staff_headers(client, db_session)

    response = client.post("/quantum/users", json=_user_payload(password="short"), headers=headers)

    assert response.status_code == 422
    assert response.json()["code"] == "VALIDATION_ERROR"


def test_duplicate_email_is_conflict(client, db_session):
    headers = staff_headers(client, db_session)
    create_user(db_session, email="ada@example.com", role="dmj")

    response = client.post("/quantum/users", json=_user_payload(email="ADA@example.com"), headers=headers)

    assert response.status_code == 409
    assert response.json()["code"] == "EMAIL_ALREADY_EXISTS"


def test_update_user_keeps_password_when_omitted(client, db_session):
    headers = staff_headers(client, db_session)
    user = create_user(db_session, email="ada@example.com", role="auditeur")

    response = client.put(f"/quantum/users/{user.id}", json={"role": "dmj", "phone": "0600"}, headers=headers)

    assert response.status_code == 200
    assert response.json()["user"]["role"] == "dmj"
    assert response.json()["user"]["phone"] == "0600"
    assert login(client, "ada@example.com")


def test_list_users_filters_by_role_and_search(client, db_session):
    headers = staff_headers(client, db_session)
    create_user(db_session, email="ada@example.com", first_name="Ada", role="dmj")
    create_user(db_session, email="bob@example.com", first_name="Bob", role="auditeur")

    by_role = client.get("/quantum/users", params={"role": "dmj"}, headers=headers).json()
    by_search = client.get("/quantum/users", params={"search": "bob"}, headers=headers).json()

    assert [user["email"] for user in by_role["users"]] == ["ada@example.com"]
    assert [user["email"] for user in by_search["users"]] == ["bob@example.com"]
    assert by_search["pagination"]["total"] == 1


def test_users_endpoints_are_staff_only(client, db_session):
    create_user(db_session, email="auditor@example.com", role="auditeur")
    headers = auth_headers(login(client, "auditor@example.com"))

    response = client.get("/quantum/users", headers=headers)

    assert response.status_code == 403
    assert response.json()["details"]["required_roles"] == ["admin"]


def test_bulk_delete_users_refuses_own_account(client, db_session):
    staff = create_user(db_session, email="staff@example.com", role="admin")
    other = create_user(db_session, email="other@example.com", role="dmj")
    headers = auth_headers(login(client, "staff@example.com"))

    refused = client.post("/quantum/users/bulk-delete", json={"ids": [staff.id, other.id]}, headers=headers)
    accepted = client.post("/quantum/users/bulk-delete", json={"ids": [other.id]}, headers=headers)

    assert refused.status_code == 422
    assert accepted.status_code == 200
    assert accepted.json()["deleted"] == 1


def test_delete_missing_user(client, db_session):
    headers = staff_headers(client, db_session)

    response = client.delete("/quantum/users/999", headers=headers)

    assert response.status_code == 404
