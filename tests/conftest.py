import os
from pathlib import Path

import pytest

# Importing ``app`` builds the module-level application from the environment;
# keep that one off disk and quiet.
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_DIR", "")

from fastapi.testclient import TestClient  # noqa: E402

from app import create_app  # noqa: E402
from catalogue.product.catalog import CatalogStore  # noqa: E402
from delivery.registry import DeliveryZoneRegistry  # noqa: E402
from shared.config import Settings  # noqa: E402
from shared.database import Database  # noqa: E402

TEST_DATABASE_URL = os.environ.get("TEST_DATABASE_URL", "sqlite://")
ADMIN_EMAIL = "admin@wilaya-store.dz"
ADMIN_PASSWORD = "test-admin-pass"


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = Path(item.fspath)

        if "/domain/" in str(test_path):
            item.add_marker(pytest.mark.domain)
        elif "/application/" in str(test_path):
            item.add_marker(pytest.mark.application)
        elif "/integration/" in str(test_path):
            item.add_marker(pytest.mark.integration)
            # Integration tests are often slower
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture()
def settings():
    return Settings(
        database_url=TEST_DATABASE_URL,
        environment="test",
        admin_email=ADMIN_EMAIL,
        admin_password=ADMIN_PASSWORD,
        bcrypt_rounds=4,
        log_dir=None,
    )


@pytest.fixture()
def database(settings):
    """A fresh schema per test, dropped afterwards."""
    db = Database(settings.database_url)
    db.create_all()

    yield db

    db.drop_all()
    db.dispose()


@pytest.fixture()
def session(database):
    with database.session() as session:
        yield session


@pytest.fixture()
def wilayas(session):
    """The 58 reference wilayas, keyed by code."""
    registry = DeliveryZoneRegistry(session)
    registry.seed()
    return {wilaya.code: wilaya for wilaya in registry.list()}


@pytest.fixture()
def product_data():
    return {
        "name": "T-shirt Casbah noir",
        "description": "Coton peigné 180 g",
        "price": 2500,
        "image_url": "https://cdn.wilaya-store.dz/casbah-noir.jpg",
        "images": ["https://cdn.wilaya-store.dz/casbah-noir-dos.jpg"],
        "sizes": ["S", "M", "L"],
        "colors": ["noir"],
        "stock": 40,
        "category": "graphic",
    }


@pytest.fixture()
def make_product(session, product_data):
    """Create a product through the Catalog Store, overriding any default field."""

    def _make(**overrides):
        return CatalogStore(session).create({**product_data, **overrides})

    return _make


# ---------------------------------------------------------------------------
# HTTP fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def app(settings, database):
    return create_app(settings=settings, database=database)


@pytest.fixture()
def client(app):
    """TestClient with the lifespan running: tables, wilayas and the admin account exist."""
    with TestClient(app) as client:
        yield client


@pytest.fixture()
def admin_client(client):
    response = client.post("/api/admin/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
    assert response.status_code == 200
    return client


@pytest.fixture()
def anonymous_client(app, client):
    """A second client on the same running app, without the admin cookie."""
    return TestClient(app)
