"""Product — a t-shirt on sale, priced in dinars, soft-deleted via ``is_active``."""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import JSON, Boolean, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from shared.database import Base, new_id, utcnow
from shared.exceptions import ValidationError
from shared.money import MAX_AMOUNT, to_money

CATEGORY_MAX_LENGTH = 50
NAME_MAX_LENGTH = 255

# Fields an admin may set on create or update
EDITABLE_FIELDS = (
    "name",
    "description",
    "price",
    "image_url",
    "images",
    "sizes",
    "colors",
    "stock",
    "is_active",
    "category",
)


def _clean_price(value) -> Decimal:
    if value is None:
        raise ValidationError({"price": ["Price is required"]})
    try:
        price = to_money(value)
    except ValueError:
        raise ValidationError({"price": [f"Price must be a number no greater than {MAX_AMOUNT}"]}) from None
    if price < 0:
        raise ValidationError({"price": ["Price cannot be negative"]})
    return price


def _clean_stock(value) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError({"stock": ["Stock must be a whole number"]})
    if value < 0:
        raise ValidationError({"stock": ["Stock cannot be negative"]})
    return value


def _clean_name(value) -> str:
    if value is None or not str(value).strip():
        raise ValidationError({"name": ["Name is required"]})
    if len(value) > NAME_MAX_LENGTH:
        raise ValidationError({"name": [f"Name cannot exceed {NAME_MAX_LENGTH} characters"]})
    return value


def _clean_image_url(value) -> str:
    if value is None or not str(value).strip():
        raise ValidationError({"image_url": ["A primary image is required"]})
    return value


def _clean_category(value) -> str | None:
    if value is not None and len(value) > CATEGORY_MAX_LENGTH:
        raise ValidationError({"category": [f"Category cannot exceed {CATEGORY_MAX_LENGTH} characters"]})
    return value


def _clean_list(field: str, value) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, list | tuple) or not all(isinstance(item, str) for item in value):
        raise ValidationError({field: [f"{field.capitalize()} must be a list of strings"]})
    return list(value)


def _clean_flag(value) -> bool:
    if not isinstance(value, bool):
        raise ValidationError({"is_active": ["is_active must be true or false"]})
    return value


_CLEANERS = {
    "name": _clean_name,
    "price": _clean_price,
    "image_url": _clean_image_url,
    "stock": _clean_stock,
    "category": _clean_category,
    "images": lambda value: _clean_list("images", value),
    "sizes": lambda value: _clean_list("sizes", value),
    "colors": lambda value: _clean_list("colors", value),
    "is_active": _clean_flag,
}


class Product(Base):
    __tablename__ = "products"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    image_url: Mapped[str] = mapped_column(Text, nullable=False)
    images: Mapped[list[str]] = mapped_column(JSON, default=list)
    sizes: Mapped[list[str]] = mapped_column(JSON, default=list)
    colors: Mapped[list[str]] = mapped_column(JSON, default=list)
    stock: Mapped[int | None] = mapped_column(Integer, default=0)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    category: Mapped[str | None] = mapped_column(String(CATEGORY_MAX_LENGTH))
    created_at: Mapped[datetime] = mapped_column(default=utcnow, index=True)
    updated_at: Mapped[datetime] = mapped_column(default=utcnow)

    @classmethod
    def create(
        cls,
        name,
        price,
        image_url,
        description=None,
        images=None,
        sizes=None,
        colors=None,
        stock=0,
        is_active=True,
        category=None,
    ) -> "Product":
        now = utcnow()
        return cls(
            id=new_id(),
            name=_clean_name(name),
            description=description,
            price=_clean_price(price),
            image_url=_clean_image_url(image_url),
            images=_clean_list("images", images),
            sizes=_clean_list("sizes", sizes),
            colors=_clean_list("colors", colors),
            stock=_clean_stock(stock),
            is_active=bool(is_active),
            category=_clean_category(category),
            created_at=now,
            updated_at=now,
        )

    def update_details(self, **changes) -> list[str]:
        """Merge the given fields into the product and return the names that changed.

        Every value is validated before any attribute is touched.
        """
        unknown = sorted(set(changes) - set(EDITABLE_FIELDS))
        if unknown:
            raise ValidationError({field: ["Unknown product field"] for field in unknown})

        cleaned = {}
        for field, value in changes.items():
            cleaner = _CLEANERS.get(field)
            cleaned[field] = cleaner(value) if cleaner else value

        changed = [field for field, value in cleaned.items() if getattr(self, field) != value]
        for field in changed:
            setattr(self, field, cleaned[field])

        if changed:
            self.updated_at = utcnow()
        return changed

    def deactivate(self) -> None:
        self.is_active = False
        self.updated_at = utcnow()

    def __repr__(self) -> str:
        return f"<Product {self.name!r} price={self.price} active={self.is_active}>"
