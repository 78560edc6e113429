"""Storefront load test scenarios.

Anonymous shoppers browse the catalogue and check out. Checkout reads product
and wilaya ids from the listing endpoints, so a catalogue must exist first
(run ``CatalogueAdminJourney`` or seed products by hand).
"""

import random

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import order_data


class BrowseAndCheckoutJourney(SequentialTaskSet):
    """List products -> View one -> List wilayas -> Place order."""

    def on_start(self):
        self.product_ids = []
        self.wilaya_id = None

    @task
    def list_products(self):
        with self.client.get("/api/products", catch_response=True, name="GET /api/products") as resp:
            if resp.status_code != 200:
                resp.failure(f"List products failed: {resp.status_code}")
                self.interrupt()
                return
            self.product_ids = [product["id"] for product in resp.json()]
            if not self.product_ids:
                resp.success()
                self.interrupt()

    @task
    def view_product(self):
        product_id = random.choice(self.product_ids)
        with self.client.get(
            f"/api/products/{product_id}",
            catch_response=True,
            name="GET /api/products/{id}",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"View product failed: {resp.status_code}")

    @task
    def list_wilayas(self):
        with self.client.get("/api/wilayas", catch_response=True, name="GET /api/wilayas") as resp:
            if resp.status_code == 200 and resp.json():
                self.wilaya_id = random.choice(resp.json())["id"]
            else:
                resp.failure(f"List wilayas failed: {resp.status_code}")
                self.interrupt()

    @task
    def place_order(self):
        with self.client.post(
            "/api/orders",
            json=order_data(self.wilaya_id, self.product_ids),
            catch_response=True,
            name="POST /api/orders",
        ) as resp:
            if resp.status_code != 201:
                resp.failure(f"Place order failed: {resp.status_code}")

    @task
    def done(self):
        self.interrupt()


class WindowShopper(SequentialTaskSet):
    """List products -> View a few -> Leave."""

    @task
    def browse(self):
        resp = self.client.get("/api/products", name="GET /api/products")
        if resp.status_code != 200:
            self.interrupt()
            return
        for product in random.sample(resp.json(), k=min(3, len(resp.json()))):
            self.client.get(f"/api/products/{product['id']}", name="GET /api/products/{id}")
        self.interrupt()


class ShopperUser(HttpUser):
    wait_time = between(1, 4)
    tasks = {BrowseAndCheckoutJourney: 1, WindowShopper: 3}
