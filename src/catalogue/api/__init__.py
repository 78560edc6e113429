"""Catalogue domain API package."""

from catalogue.api.routes import admin_category_router, admin_product_router, product_router

__all__ = ["product_router", "admin_product_router", "admin_category_router"]
