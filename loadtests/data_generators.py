"""Faker-based data generators for Locust load test scenarios.

Payloads pass the API's validation rules and match the field names of the
Pydantic request schemas.
"""

import random
import uuid

from faker import Faker

fake = Faker("fr_FR")

SIZES = ["XS", "S", "M", "L", "XL", "XXL"]
COLORS = ["noir", "blanc", "rouge", "vert", "bleu marine", "sable"]
CATEGORIES = ["graphic", "vintage", "oversize", "sport", "calligraphie"]
STATUSES = ["pending", "confirmed", "shipped", "delivered", "cancelled"]

# ---------- Catalogue ----------


def product_data() -> dict:
    """Generate a CreateProductRequest payload."""
    slug = uuid.uuid4().hex[:10]
    return {
        "name": f"T-shirt {fake.city()} {fake.word().capitalize()}"[:255],
        "description": fake.paragraph(nb_sentences=2),
        "price": random.choice([1500, 1800, 2200, 2500, 3200]),
        "image_url": f"https://cdn.wilaya-store.dz/products/{slug}.jpg",
        "images": [f"https://cdn.wilaya-store.dz/products/{slug}-{n}.jpg" for n in range(random.randint(0, 3))],
        "sizes": random.sample(SIZES, k=random.randint(1, len(SIZES))),
        "colors": random.sample(COLORS, k=random.randint(1, 3)),
        "stock": random.randint(0, 200),
        "category": random.choice(CATEGORIES),
    }


def product_changes() -> dict:
    """Generate a partial UpdateProductRequest payload."""
    return random.choice(
        [
            {"price": random.choice([1400, 1900, 2600])},
            {"stock": random.randint(0, 200)},
            {"sizes": random.sample(SIZES, k=3)},
        ]
    )


# ---------- Delivery ----------


def delivery_price() -> int:
    return random.choice([300, 400, 450, 500, 600, 700, 800, 1000])


# ---------- Ordering ----------


def algerian_phone() -> str:
    return f"0{random.choice([5, 6, 7])}{random.randint(10000000, 99999999)}"


def order_data(wilaya_id: str, product_ids: list[str]) -> dict:
    """Generate a CreateOrderRequest payload over 1-3 of the given products."""
    chosen = random.sample(product_ids, k=min(len(product_ids), random.randint(1, 3)))
    return {
        "customer_name": fake.name(),
        "customer_phone": algerian_phone(),
        "wilaya_id": wilaya_id,
        "address": fake.street_address(),
        "items": [{"product_id": product_id, "quantity": random.randint(1, 4)} for product_id in chosen],
    }


def next_status() -> str:
    return random.choice(STATUSES)
