from __future__ import annotations

from datetime import datetime


def test_create_order_assigns_prefixed_id_and_date(client):
    resp = client.post("/api/orders", json={"userId": "U1", "items": [{"productId": "p1", "qty": 2}], "id": "x"})

    assert resp.status_code == 201
    order = resp.json()
    assert order["id"].startswith("ORD-")
    assert order["id"] != "ORD-x"
    assert order["userId"] == "U1"
    assert order["items"] == [{"productId": "p1", "qty": 2}]
    datetime.fromisoformat(order["date"].replace("Z", "+00:00"))


def test_orders_are_listed_per_user(client):
    first = client.post("/api/orders", json={"userId": "U1", "total": 5}).json()
    client.post("/api/orders", json={"userId": "U2", "total": 7})
    second = client.post("/api/orders", json={"userId": "U1", "total": 9}).json()

    resp = client.get("/api/orders/U1")

    assert resp.status_code == 200
    assert resp.json() == [first, second]


def test_user_without_orders_gets_empty_list(client):
    resp = client.get("/api/orders/ghost")
    assert resp.status_code == 200
    assert resp.json() == []


def test_order_ids_are_unique(client):
    ids = {client.post("/api/orders", json={"userId": "U1"}).json()["id"] for _ in range(20)}
    assert len(ids) == 20


def test_order_with_nan_is_rejected_and_not_stored(client, app):
    resp = client.post(
        "/api/orders",
        content='{"userId": "U1", "total": NaN}',
        headers={"content-type": "application/json"},
    )

    assert resp.status_code == 400
    assert resp.json() == {"error": "Invalid JSON body"}
    assert app.state.store.read()["orders"] == []
    assert client.get("/api/orders/U1").json() == []


def test_failed_order_write_is_500(client, app, monkeypatch):
    monkeypatch.setattr(app.state.store, "write", lambda document: False)

    resp = client.post("/api/orders", json={"userId": "U1"})

    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to save order"}


def test_unreadable_storage_fails_order_listing(client, app):
    app.state.store.path.write_text("[]", encoding="utf-8")

    resp = client.get("/api/orders/U1")

    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to fetch orders"}


def test_orders_and_products_share_the_document(client, app):
    client.post("/api/products", json={"name": "Widget", "sellerId": "S1"})
    client.post("/api/orders", json={"userId": "U1"})

    document = app.state.store.read()

    assert len(document["products"]) == 1
    assert len(document["orders"]) == 1
    assert document["users"] == []
