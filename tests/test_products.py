# File: tests/test_products.py

import pytest

WIDGET = {"name": "Widget", "description": "A small widget", "price": 9.99, "quantity": 3}


def add(client, payload=WIDGET):
    return client.post("/api/products", json=payload)


def test_list_products_empty(client):
    resp = client.get("/api/products")
    assert resp.status_code == 200
    assert resp.json() == []


@pytest.mark.parametrize(
    "payload",
    [
        WIDGET,
        {"name": "Freebie", "description": "", "price": 0, "quantity": 0},
        {"name": "Crate", "description": "Bulk", "price": 1250.5, "quantity": 400},
    ],
)
def test_add_then_list(client, payload):
    resp = add(client, payload)
    assert resp.status_code == 200
    assert resp.text == "Product added successfully!"

    [product] = client.get("/api/products").json()
    assert isinstance(product["id"], int)
    assert product["name"] == payload["name"]
    assert product["description"] == payload["description"]
    assert product["price"] == pytest.approx(payload["price"])
    assert product["quantity"] == payload["quantity"]


def test_ids_are_distinct(client):
    add(client)
    add(client)
    ids = [p["id"] for p in client.get("/api/products").json()]
    assert len(set(ids)) == 2


def test_update_replaces_all_fields(client):
    add(client)
    [product] = client.get("/api/products").json()

    replacement = {"name": "Gadget", "description": "Bigger", "price": 19.5, "quantity": 7}
    resp = client.put(f"/api/products/{product['id']}", json=replacement)
    assert resp.status_code == 200
    assert resp.text == "Product updated successfully!"

    [updated] = client.get("/api/products").json()
    assert updated == {"id": product["id"], **replacement}


def test_update_missing_product_is_silent(client):
    add(client)
    before = client.get("/api/products").json()

    resp = client.put("/api/products/9999", json=WIDGET)
    assert resp.status_code == 200
    assert client.get("/api/products").json() == before


def test_delete_product_is_idempotent(client):
    add(client)
    add(client, {**WIDGET, "name": "Other"})
    first, second = client.get("/api/products").json()

    for _ in range(2):
        resp = client.delete(f"/api/products/{first['id']}")
        assert resp.status_code == 200
        assert resp.text == "Product deleted successfully!"

    remaining = client.get("/api/products").json()
    assert [p["id"] for p in remaining] == [second["id"]]


def test_product_routes_database_failure(failing_client):
    cases = [
        ("get", "/api/products", None, "Error retrieving products"),
        ("post", "/api/products", WIDGET, "Error adding product"),
        ("put", "/api/products/1", WIDGET, "Error updating product"),
        ("delete", "/api/products/1", None, "Error deleting product"),
    ]
    for method, url, body, message in cases:
        kwargs = {"json": body} if body is not None else {}
        resp = failing_client.request(method.upper(), url, **kwargs)
        assert resp.status_code == 500
        assert resp.text == message


def test_cors_allows_any_origin(client):
    resp = client.options(
        "/api/products",
        headers={
            "Origin": "https://shop.example.com",
            "Access-Control-Request-Method": "POST",
        },
    )
    assert resp.status_code == 200
    assert resp.headers["access-control-allow-origin"] == "*"


def test_incomplete_product_body_is_plain_500(client):
    resp = add(client, {"name": "x"})
    assert resp.status_code == 500
    assert resp.headers["content-type"].startswith("text/plain")
    assert resp.text == "Error adding product"
    assert "price" not in resp.text
    assert client.get("/api/products").json() == []

    resp = client.put("/api/products/1", json={"name": "x", "price": "free"})
    assert resp.status_code == 500
    assert resp.text == "Error updating product"
