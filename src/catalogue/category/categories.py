"""Categories as a view over ``Product.category``.

There is no category table: a category exists while at least one product
carries the label. Labels are compared verbatim, so ``"Hoodies"`` and
``"hoodies "`` are two different categories.
"""

from __future__ import annotations

from sqlalchemy import func, select, update
from sqlalchemy.orm import Session

from catalogue.product.product import CATEGORY_MAX_LENGTH, Product
from shared.database import utcnow
from shared.exceptions import ConflictError, ObjectNotFoundError, ValidationError
from shared.logging import get_logger

logger = get_logger(__name__)


def normalize_category(name: str) -> str:
    return (name or "").strip().lower()


class CategoryCatalog:
    def __init__(self, session: Session):
        self.session = session

    def list(self) -> list[str]:
        """Distinct non-blank labels on active products, sorted."""
        query = (
            select(Product.category)
            .where(Product.is_active.is_(True), Product.category.is_not(None))
            .distinct()
        )
        labels = {label for label in self.session.scalars(query) if label and label.strip()}
        return sorted(labels)

    def create(self, name: str) -> str:
        """Validate a new label; nothing is stored until a product uses it."""
        label = normalize_category(name)
        if not label:
            raise ValidationError({"name": ["Category name is required"]})
        if len(label) > CATEGORY_MAX_LENGTH:
            raise ValidationError({"name": [f"Category name cannot exceed {CATEGORY_MAX_LENGTH} characters"]})
        if label in {normalize_category(existing) for existing in self.list()}:
            raise ConflictError("Category already exists")
        return label

    def delete(self, name: str) -> int:
        """Clear ``name`` from every product carrying it, active or not."""
        carriers = self.session.scalar(select(func.count()).select_from(Product).where(Product.category == name))
        if not carriers:
            raise ObjectNotFoundError(f"Category {name} not found")

        result = self.session.execute(
            update(Product).where(Product.category == name).values(category=None, updated_at=utcnow())
        )
        self.session.commit()

        logger.info("category_deleted", category=name, products_updated=result.rowcount)
        return result.rowcount
