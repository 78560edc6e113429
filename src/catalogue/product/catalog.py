"""Catalog Store — product reads for the storefront and writes for admins."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from catalogue.product.product import Product
from shared.exceptions import ObjectNotFoundError
from shared.logging import get_logger

logger = get_logger(__name__)


class CatalogStore:
    def __init__(self, session: Session):
        self.session = session

    def list(self) -> list[Product]:
        """Active products, newest first."""
        query = select(Product).where(Product.is_active.is_(True)).order_by(Product.created_at.desc())
        return list(self.session.scalars(query))

    def get(self, product_id: str) -> Product:
        """Any product, active or not; soft-deleted ones still back old orders."""
        product = self.session.get(Product, product_id)
        if product is None:
            raise ObjectNotFoundError(f"Product {product_id} not found")
        return product

    def create(self, data: dict) -> Product:
        product = Product.create(**data)
        self.session.add(product)
        self.session.commit()

        logger.info("product_created", product_id=product.id, name=product.name, price=str(product.price))
        return product

    def update(self, product_id: str, changes: dict) -> Product:
        product = self.get(product_id)
        changed = product.update_details(**changes)
        self.session.commit()

        logger.info("product_updated", product_id=product.id, fields=changed)
        return product

    def soft_delete(self, product_id: str) -> Product:
        product = self.get(product_id)
        product.deactivate()
        self.session.commit()

        logger.info("product_deactivated", product_id=product.id)
        return product
