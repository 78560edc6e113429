"""Integration tests for the wilaya endpoints via TestClient."""

from decimal import Decimal


def _wilaya(client, code):
    return next(w for w in client.get("/api/wilayas").json() if w["code"] == code)


class TestListWilayasAPI:
    def test_lists_seeded_wilayas(self, client):
        response = client.get("/api/wilayas")
        assert response.status_code == 200
        body = response.json()
        assert len(body) == 58
        assert body[0]["code"] == "01"

    def test_wilaya_fields(self, client):
        alger = _wilaya(client, "16")
        assert alger["name"] == "Alger"
        assert Decimal(alger["delivery_price"]) == Decimal("300")
        assert "id" in alger


class TestUpdateDeliveryPriceAPI:
    def test_requires_admin(self, client):
        alger = _wilaya(client, "16")
        response = client.put(f"/api/admin/wilayas/{alger['id']}/delivery-price", json={"price": 350})
        assert response.status_code == 401

    def test_updates_fee(self, admin_client):
        alger = _wilaya(admin_client, "16")
        response = admin_client.put(f"/api/admin/wilayas/{alger['id']}/delivery-price", json={"price": 350})
        assert response.status_code == 200
        assert Decimal(response.json()["delivery_price"]) == Decimal("350")
        assert Decimal(_wilaya(admin_client, "16")["delivery_price"]) == Decimal("350")

    def test_negative_fee_returns_400_and_keeps_fee(self, admin_client):
        alger = _wilaya(admin_client, "16")
        response = admin_client.put(f"/api/admin/wilayas/{alger['id']}/delivery-price", json={"price": -5})
        assert response.status_code == 400
        assert "delivery_price" in response.json()["errors"]
        assert Decimal(_wilaya(admin_client, "16")["delivery_price"]) == Decimal("300")

    def test_fee_beyond_column_range_returns_400(self, admin_client):
        alger = _wilaya(admin_client, "16")
        response = admin_client.put(f"/api/admin/wilayas/{alger['id']}/delivery-price", json={"price": "1e30"})
        assert response.status_code == 400
        assert "delivery_price" in response.json()["errors"]
        assert Decimal(_wilaya(admin_client, "16")["delivery_price"]) == Decimal("300")

    def test_missing_price_returns_400(self, admin_client):
        alger = _wilaya(admin_client, "16")
        response = admin_client.put(f"/api/admin/wilayas/{alger['id']}/delivery-price", json={})
        assert response.status_code == 400

    def test_unknown_wilaya_returns_404(self, admin_client):
        response = admin_client.put("/api/admin/wilayas/missing/delivery-price", json={"price": 100})
        assert response.status_code == 404
