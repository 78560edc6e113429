"""Admin panel load test scenarios.

Each journey logs in first; the session cookie is kept by the Locust client.
"""

import random

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import delivery_price, next_status, product_changes, product_data
from loadtests.helpers.session import login_admin


class CatalogueAdminJourney(SequentialTaskSet):
    """Login -> Create product -> Edit it -> List categories."""

    def on_start(self):
        self.product_id = None
        if not login_admin(self.client):
            self.interrupt()

    @task
    def create_product(self):
        with self.client.post(
            "/api/admin/products",
            json=product_data(),
            catch_response=True,
            name="POST /api/admin/products",
        ) as resp:
            if resp.status_code == 201:
                self.product_id = resp.json()["id"]
            else:
                resp.failure(f"Create product failed: {resp.status_code}")
                self.interrupt()

    @task
    def update_product(self):
        with self.client.put(
            f"/api/admin/products/{self.product_id}",
            json=product_changes(),
            catch_response=True,
            name="PUT /api/admin/products/{id}",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Update product failed: {resp.status_code}")

    @task
    def list_categories(self):
        self.client.get("/api/admin/categories", name="GET /api/admin/categories")

    @task
    def done(self):
        self.interrupt()


class OrderDeskJourney(SequentialTaskSet):
    """Login -> Dashboard -> List orders -> Move one order along."""

    def on_start(self):
        self.order_ids = []
        if not login_admin(self.client):
            self.interrupt()

    @task
    def dashboard(self):
        with self.client.get("/api/admin/analytics", catch_response=True, name="GET /api/admin/analytics") as resp:
            if resp.status_code != 200:
                resp.failure(f"Analytics failed: {resp.status_code}")

    @task
    def list_orders(self):
        with self.client.get("/api/admin/orders", catch_response=True, name="GET /api/admin/orders") as resp:
            if resp.status_code == 200:
                self.order_ids = [order["id"] for order in resp.json()]
            else:
                resp.failure(f"List orders failed: {resp.status_code}")
            if not self.order_ids:
                self.interrupt()

    @task
    def update_status(self):
        order_id = random.choice(self.order_ids)
        with self.client.put(
            f"/api/admin/orders/{order_id}/status",
            json={"status": next_status()},
            catch_response=True,
            name="PUT /api/admin/orders/{id}/status",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Update status failed: {resp.status_code}")

    @task
    def done(self):
        self.interrupt()


class DeliveryPricingJourney(SequentialTaskSet):
    """Login -> List wilayas -> Reprice one."""

    def on_start(self):
        self.wilaya_id = None
        if not login_admin(self.client):
            self.interrupt()

    @task
    def list_wilayas(self):
        resp = self.client.get("/api/wilayas", name="GET /api/wilayas")
        if resp.status_code != 200 or not resp.json():
            self.interrupt()
            return
        self.wilaya_id = random.choice(resp.json())["id"]

    @task
    def reprice(self):
        with self.client.put(
            f"/api/admin/wilayas/{self.wilaya_id}/delivery-price",
            json={"price": delivery_price()},
            catch_response=True,
            name="PUT /api/admin/wilayas/{id}/delivery-price",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Reprice failed: {resp.status_code}")

    @task
    def done(self):
        self.interrupt()


class AdminUser(HttpUser):
    wait_time = between(2, 6)
    tasks = {CatalogueAdminJourney: 3, OrderDeskJourney: 5, DeliveryPricingJourney: 1}
