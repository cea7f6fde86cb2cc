from tests.api_helpers import create_category, create_order, create_product, create_user, staff_headers


def _seed_order(db_session, status: str = "en_attente"):
    customer = create_user(db_session, email="customer@example.com", first_name="Carl", last_name="Client", role="auditeur")
    product = create_product(db_session, create_category(db_session, "Audio"), name="Turntable", price="150.00")
    return create_order(db_session, customer, product, quantity=2, status=status)


def test_list_and_get_order(client, db_session):
    headers = staff_headers(client, db_session)
    order = _seed_order(db_session)

    listing = client.get("/quantum/orders", headers=headers).json()
    detail = client.get(f"/quantum/orders/{order.id}", headers=headers).json()["order"]

    assert listing["orders"][0]["customer_name"] == "Carl Client"
    assert listing["orders"][0]["items"] is None
    assert detail["total"] == 300.0
    assert detail["items"] == [
        {"id": detail["items"][0]["id"], "product_id": order.items[0].product_id, "product_name": "Turntable", "quantity": 2, "unit_price": 150.0}
    ]


def test_filter_orders_by_status(client, db_session):
    headers = staff_headers(client, db_session)
    _seed_order(db_session, status="shipped")

    pending = client.get("/quantum/orders", params={"status": "en_attente"}, headers=headers).json()
    shipped = client.get("/quantum/orders", params={"status": "shipped"}, headers=headers).json()

    assert pending["orders"] == []
    assert len(shipped["orders"]) == 1


def test_update_order_status(client, db_session):
    headers = staff_headers(client, db_session)
    order = _seed_order(db_session)

    response = client.patch(f"/quantum/orders/{order.id}/status", json={"status": "delivered"}, headers=headers)
    invalid = client.patch(f"/quantum/orders/{order.id}/status", json={"status": "lost"}, headers=headers)

    assert response.status_code == 200
    assert response.json()["order"]["status"] == "delivered"
    assert invalid.status_code == 422


def test_delete_order_removes_lines(client, db_session):
    headers = staff_headers(client, db_session)
    order = _seed_order(db_session)

    response = client.delete(f"/quantum/orders/{order.id}", headers=headers)

    assert response.status_code == 200
    assert client.get(f"/quantum/orders/{order.id}", headers=headers).status_code == 404
