"""Integration tests for the admin category endpoints via TestClient."""


def _create_product(client, product_data, category):
    response = client.post("/api/admin/products", json={**product_data, "category": category})
    assert response.status_code == 201
    return response.json()


class TestCategoriesAPI:
    def test_requires_admin(self, client):
        assert client.get("/api/admin/categories").status_code == 401
        assert client.post("/api/admin/categories", json={"name": "oversize"}).status_code == 401
        assert client.delete("/api/admin/categories/graphic").status_code == 401

    def test_list_categories(self, admin_client, product_data):
        _create_product(admin_client, product_data, "vintage")
        _create_product(admin_client, product_data, "graphic")

        response = admin_client.get("/api/admin/categories")
        assert response.status_code == 200
        assert response.json() == ["graphic", "vintage"]

    def test_create_category(self, admin_client):
        response = admin_client.post("/api/admin/categories", json={"name": " Oversize "})
        assert response.status_code == 201
        assert response.json() == {"message": "Category created successfully", "category": "oversize"}

    def test_create_existing_category_returns_409(self, admin_client, product_data):
        _create_product(admin_client, product_data, "graphic")
        response = admin_client.post("/api/admin/categories", json={"name": "graphic"})
        assert response.status_code == 409

    def test_create_blank_category_returns_400(self, admin_client):
        response = admin_client.post("/api/admin/categories", json={"name": "   "})
        assert response.status_code == 400

    def test_delete_category_clears_products(self, admin_client, product_data):
        product = _create_product(admin_client, product_data, "graphic")

        response = admin_client.delete("/api/admin/categories/graphic")
        assert response.status_code == 200
        assert response.json()["products_updated"] == 1

        assert admin_client.get("/api/admin/categories").json() == []
        assert admin_client.get(f"/api/products/{product['id']}").json()["category"] is None

    def test_delete_unknown_category_returns_404(self, admin_client):
        assert admin_client.delete("/api/admin/categories/ghost").status_code == 404
