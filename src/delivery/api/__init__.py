"""Delivery API package."""

from delivery.api.routes import admin_wilaya_router, wilaya_router

__all__ = ["wilaya_router", "admin_wilaya_router"]
