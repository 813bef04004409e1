def test_list_returns_seeded_products(client, auth_headers):
    r = client.get("/api/products", headers=auth_headers)
    assert r.status_code == 200
    body = r.json()
    assert [p["id"] for p in body] == ["1", "2", "3"]
    assert body[0] == {
        "id": "1",
        "name": "Laptop",
        "description": "High-performance laptop with 16GB RAM",
        "price": 1200,
        "category": "electronics",
        "inStock": True,
    }


def test_get_one(client, auth_headers):
    r = client.get("/api/products/3", headers=auth_headers)
    assert r.status_code == 200
    assert r.json()["name"] == "Coffee Maker"
    assert r.json()["inStock"] is False


def test_get_missing_is_404_and_changes_nothing(client, auth_headers):
    before = client.get("/api/products", headers=auth_headers).json()
    r = client.get("/api/products/does-not-exist", headers=auth_headers)
    assert r.status_code == 404
    assert r.json() == {"message": "Product not found"}
    assert client.get("/api/products", headers=auth_headers).json() == before


def test_create_then_get_round_trip(client, auth_headers, mug_payload):
    r = client.post("/api/products", json=mug_payload, headers=auth_headers)
    assert r.status_code == 201
    created = r.json()
    assert created["inStock"] is False
    assert created["id"]
    assert {k: created[k] for k in mug_payload} == mug_payload

    fetched = client.get(f"/api/products/{created['id']}", headers=auth_headers)
    assert fetched.status_code == 200
    assert fetched.json() == created


def test_created_ids_are_unique_and_listed(client, auth_headers, mug_payload):
    ids = [
        client.post("/api/products", json=mug_payload, headers=auth_headers).json()["id"]
        for _ in range(5)
    ]
    assert len(set(ids)) == 5
    listed = [p["id"] for p in client.get("/api/products", headers=auth_headers).json()]
    assert listed[-5:] == ids


def test_create_with_in_stock(client, auth_headers, mug_payload):
    r = client.post("/api/products", json={**mug_payload, "inStock": True}, headers=auth_headers)
    assert r.status_code == 201
    assert r.json()["inStock"] is True


def test_create_invalid_payloads_are_rejected(client, auth_headers, mug_payload):
    invalid = [
        {k: v for k, v in mug_payload.items() if k != "name"},
        {k: v for k, v in mug_payload.items() if k != "description"},
        {k: v for k, v in mug_payload.items() if k != "category"},
        {k: v for k, v in mug_payload.items() if k != "price"},
        {**mug_payload, "price": 0},
        {**mug_payload, "price": "not a number"},
        {},
    ]
    for payload in invalid:
        r = client.post("/api/products", json=payload, headers=auth_headers)
        assert r.status_code == 400, payload
        assert r.json() == {"message": "Missing required fields"}

    assert len(client.get("/api/products", headers=auth_headers).json()) == 3


def test_create_without_body_is_rejected(client, auth_headers):
    r = client.post("/api/products", headers=auth_headers)
    assert r.status_code == 400
    assert r.json() == {"message": "Missing required fields"}


def test_update_price_only(client, auth_headers):
    before = client.get("/api/products/1", headers=auth_headers).json()
    r = client.put("/api/products/1", json={"price": 999}, headers=auth_headers)
    assert r.status_code == 200
    assert r.json() == {**before, "price": 999}


def test_update_in_stock_to_false(client, auth_headers):
    r = client.put("/api/products/1", json={"inStock": False}, headers=auth_headers)
    assert r.status_code == 200
    assert r.json()["inStock"] is False
    assert client.get("/api/products/1", headers=auth_headers).json()["inStock"] is False


def test_update_ignores_empty_values_and_id(client, auth_headers):
    r = client.put("/api/products/2", json={"name": "", "id": "99"}, headers=auth_headers)
    assert r.status_code == 200
    assert r.json()["id"] == "2"
    assert r.json()["name"] == "Smartphone"


def test_update_missing_is_404(client, auth_headers):
    r = client.put("/api/products/nope", json={"price": 5}, headers=auth_headers)
    assert r.status_code == 404
    assert r.json() == {"message": "Product not found"}


def test_delete_twice(client, auth_headers):
    r = client.delete("/api/products/2", headers=auth_headers)
    assert r.status_code == 204
    assert r.content == b""
    assert [p["id"] for p in client.get("/api/products", headers=auth_headers).json()] == ["1", "3"]

    again = client.delete("/api/products/2", headers=auth_headers)
    assert again.status_code == 404
    assert again.json() == {"message": "Product not found"}


def test_store_is_per_application(app, settings, auth_headers, mug_payload):
    from fastapi.testclient import TestClient
    from app.main import create_app

    first = TestClient(app)
    second = TestClient(create_app(settings))
    first.post("/api/products", json=mug_payload, headers=auth_headers)
    assert len(first.get("/api/products", headers=auth_headers).json()) == 4
    assert len(second.get("/api/products", headers=auth_headers).json()) == 3


def test_update_without_body_on_missing_id_is_404(client, auth_headers):
    r = client.put("/api/products/nope", headers=auth_headers)
    assert r.status_code == 404
    assert r.json() == {"message": "Product not found"}


def test_update_without_body_returns_unchanged_product(client, auth_headers):
    before = client.get("/api/products/1", headers=auth_headers).json()
    r = client.put("/api/products/1", headers=auth_headers)
    assert r.status_code == 200
    assert r.json() == before


def test_update_ill_typed_body_on_missing_id_is_404(client, auth_headers):
    r = client.put("/api/products/nope", json={"price": "abc"}, headers=auth_headers)
    assert r.status_code == 404
    assert r.json() == {"message": "Product not found"}


def test_trailing_slash_is_served_directly(client, auth_headers, mug_payload):
    r = client.get("/api/products/", headers=auth_headers, follow_redirects=False)
    assert r.status_code == 200
    assert [p["id"] for p in r.json()] == ["1", "2", "3"]

    created = client.post("/api/products/", json=mug_payload, headers=auth_headers, follow_redirects=False)
    assert created.status_code == 201
    assert client.get("/api/products/").status_code == 401
