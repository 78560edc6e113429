"""Wilaya — an Algerian province and its flat delivery fee."""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from shared.database import Base, new_id, utcnow
from shared.exceptions import ValidationError
from shared.money import MAX_AMOUNT, to_money


def _validated_fee(value) -> Decimal:
    try:
        fee = to_money(value)
    except ValueError:
        message = f"Delivery price must be a number no greater than {MAX_AMOUNT}"
        raise ValidationError({"delivery_price": [message]}) from None
    if fee < 0:
        raise ValidationError({"delivery_price": ["Delivery price cannot be negative"]})
    return fee


class Wilaya(Base):
    """A delivery zone. Seeded once, repriced by admins, never deleted."""

    __tablename__ = "wilayas"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    code: Mapped[str] = mapped_column(String(2), unique=True, nullable=False)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    delivery_price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    created_at: Mapped[datetime] = mapped_column(default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(default=utcnow)

    @classmethod
    def create(cls, code: str, name: str, delivery_price) -> "Wilaya":
        if not code or len(code) != 2 or not code.isdigit():
            raise ValidationError({"code": ["Wilaya code must be two digits"]})
        if not name or not name.strip():
            raise ValidationError({"name": ["Wilaya name is required"]})

        now = utcnow()
        return cls(
            id=new_id(),
            code=code,
            name=name.strip(),
            delivery_price=_validated_fee(delivery_price),
            created_at=now,
            updated_at=now,
        )

    def set_delivery_price(self, price) -> Decimal:
        """Reprice the zone and return the previous fee."""
        new_price = _validated_fee(price)
        previous = self.delivery_price
        self.delivery_price = new_price
        self.updated_at = utcnow()
        return previous

    @property
    def label(self) -> str:
        return f"{self.code} - {self.name}"

    def __repr__(self) -> str:
        return f"<Wilaya {self.code} {self.name!r} fee={self.delivery_price}>"
