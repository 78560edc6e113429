"""Integration tests for the product endpoints via TestClient."""

from decimal import Decimal

import pytest


@pytest.fixture()
def payload(product_data):
    return dict(product_data)


def _create(client, payload, **overrides):
    response = client.post("/api/admin/products", json={**payload, **overrides})
    assert response.status_code == 201
    return response.json()


class TestStorefrontProductsAPI:
    def test_empty_catalogue(self, client):
        response = client.get("/api/products")
        assert response.status_code == 200
        assert response.json() == []

    def test_get_unknown_product_returns_404(self, client):
        response = client.get("/api/products/missing")
        assert response.status_code == 404
        assert response.json()["message"] == "Product missing not found"

    def test_listing_shows_active_products(self, admin_client, payload):
        created = _create(admin_client, payload)
        body = admin_client.get("/api/products").json()
        assert [p["id"] for p in body] == [created["id"]]
        assert Decimal(body[0]["price"]) == Decimal("2500")
        assert body[0]["sizes"] == ["S", "M", "L"]


class TestAdminProductsAPI:
    def test_create_requires_admin(self, client, payload):
        response = client.post("/api/admin/products", json=payload)
        assert response.status_code == 401
        assert response.json()["message"] == "Unauthorized"

    def test_create_returns_201(self, admin_client, payload):
        created = _create(admin_client, payload)
        assert created["name"] == payload["name"]
        assert created["is_active"] is True
        assert created["category"] == "graphic"

    def test_create_missing_required_field_returns_400(self, admin_client, payload):
        del payload["image_url"]
        response = admin_client.post("/api/admin/products", json=payload)
        assert response.status_code == 400

    def test_create_negative_price_returns_400(self, admin_client, payload):
        response = admin_client.post("/api/admin/products", json={**payload, "price": -100})
        assert response.status_code == 400
        assert "price" in response.json()["errors"]

    def test_create_price_beyond_column_range_returns_400(self, admin_client, payload):
        response = admin_client.post("/api/admin/products", json={**payload, "price": "1e30"})
        assert response.status_code == 400
        assert "price" in response.json()["errors"]
        assert admin_client.get("/api/products").json() == []

    def test_update_and_delete_require_admin(self, admin_client, anonymous_client, payload):
        created = _create(admin_client, payload)

        response = anonymous_client.put(f"/api/admin/products/{created['id']}", json={"price": 1})
        assert response.status_code == 401
        assert anonymous_client.delete(f"/api/admin/products/{created['id']}").status_code == 401

        product = admin_client.get(f"/api/products/{created['id']}").json()
        assert Decimal(product["price"]) == Decimal(payload["price"])
        assert product["is_active"] is True

    def test_partial_update(self, admin_client, payload):
        created = _create(admin_client, payload)
        response = admin_client.put(f"/api/admin/products/{created['id']}", json={"stock": 3})
        assert response.status_code == 200
        body = response.json()
        assert body["stock"] == 3
        assert Decimal(body["price"]) == Decimal("2500")
        assert body["name"] == payload["name"]

    def test_update_unknown_product_returns_404(self, admin_client):
        response = admin_client.put("/api/admin/products/missing", json={"stock": 3})
        assert response.status_code == 404

    def test_delete_soft_deletes(self, admin_client, payload):
        created = _create(admin_client, payload)

        response = admin_client.delete(f"/api/admin/products/{created['id']}")
        assert response.status_code == 200
        assert response.json() == {"message": "Product deleted successfully"}

        assert admin_client.get("/api/products").json() == []
        retrieved = admin_client.get(f"/api/products/{created['id']}")
        assert retrieved.status_code == 200
        assert retrieved.json()["is_active"] is False

    def test_delete_unknown_product_returns_404(self, admin_client):
        assert admin_client.delete("/api/admin/products/missing").status_code == 404
