"""Tests for application wiring: startup preparation, health check and error mapping."""

import inspect

from fastapi.routing import APIRoute
from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError

from bootstrap import prepare_database
from delivery.registry import DeliveryZoneRegistry
from identity.admin.admin import AdminAccount


class TestStartup:
    def test_startup_seeds_wilayas_and_bootstraps_admin(self, client, database):
        assert len(client.get("/api/wilayas").json()) == 58

        with database.session() as session:
            assert session.scalar(select(func.count()).select_from(AdminAccount)) == 1

    def test_preparation_is_idempotent(self, settings, database):
        prepare_database(database, settings)
        prepare_database(database, settings)

        with database.session() as session:
            assert len(DeliveryZoneRegistry(session).list()) == 58
            assert session.scalar(select(func.count()).select_from(AdminAccount)) == 1


class TestHealth:
    def test_health_ok(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok", "database": "ok"}

    def test_health_reports_unreachable_database(self, client, database, monkeypatch):
        def broken_ping():
            raise OperationalError("SELECT 1", {}, Exception("connection refused"))

        monkeypatch.setattr(database, "ping", broken_ping)
        response = client.get("/health")
        assert response.status_code == 503
        assert response.json()["status"] == "unavailable"


class TestErrorMapping:
    def test_malformed_json_returns_400(self, client):
        response = client.post(
            "/api/orders",
            content="{not json",
            headers={"content-type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json()["message"] == "Invalid request data"

    def test_database_error_returns_generic_500(self, admin_client, monkeypatch):
        from catalogue.product.catalog import CatalogStore

        def broken_list(self):
            raise OperationalError("SELECT products", {}, Exception("database is locked"))

        monkeypatch.setattr(CatalogStore, "list", broken_list)
        response = admin_client.get("/api/products")
        assert response.status_code == 500
        assert "locked" not in response.text


class TestRouteHandlers:
    def test_handlers_run_in_threadpool(self, app):
        endpoints = {
            route.path: route.endpoint
            for route in app.routes
            if isinstance(route, APIRoute)
        }
        assert "/api/admin/login" in endpoints
        assert "/health" in endpoints

        blocking = [path for path, endpoint in endpoints.items() if inspect.iscoroutinefunction(endpoint)]
        assert blocking == []
