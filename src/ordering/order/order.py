"""Order and OrderLine — a placed order with prices frozen at checkout.

Subtotal, delivery price and total are computed once in ``Order.place`` and
never recomputed; later catalogue or wilaya repricing leaves them untouched.

Status is any one of ``OrderStatus``. Admins may move an order between any two
statuses; there is no guarded transition graph.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum

from sqlalchemy import ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalogue.product.product import Product
from delivery.wilaya import Wilaya
from shared.database import Base, new_id, utcnow
from shared.exceptions import ValidationError
from shared.money import line_total, to_money

MAX_QUANTITY = 1000


class OrderStatus(Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"

    @classmethod
    def values(cls) -> list[str]:
        return [status.value for status in cls]


class OrderLine(Base):
    """One product and quantity in an order, with its unit price captured at checkout."""

    __tablename__ = "order_items"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    order_id: Mapped[str] = mapped_column(String(36), ForeignKey("orders.id", ondelete="CASCADE"), nullable=False)
    product_id: Mapped[str] = mapped_column(String(36), ForeignKey("products.id"), nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    created_at: Mapped[datetime] = mapped_column(default=utcnow)

    order: Mapped["Order"] = relationship(back_populates="items")
    product: Mapped[Product] = relationship(lazy="joined")

    @property
    def line_total(self) -> Decimal:
        return line_total(self.price, self.quantity)


class Order(Base):
    __tablename__ = "orders"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    customer_name: Mapped[str] = mapped_column(Text, nullable=False)
    customer_phone: Mapped[str] = mapped_column(String(20), nullable=False)
    wilaya_id: Mapped[str] = mapped_column(String(36), ForeignKey("wilayas.id"), nullable=False)
    address: Mapped[str | None] = mapped_column(Text)
    subtotal: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    delivery_price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    total: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    status: Mapped[str] = mapped_column(String(20), default=OrderStatus.PENDING.value)
    created_at: Mapped[datetime] = mapped_column(default=utcnow, index=True)
    updated_at: Mapped[datetime] = mapped_column(default=utcnow)

    wilaya: Mapped[Wilaya] = relationship(lazy="joined")
    items: Mapped[list[OrderLine]] = relationship(
        back_populates="order",
        cascade="all, delete-orphan",
        order_by=OrderLine.created_at,
        lazy="selectin",
    )

    @classmethod
    def place(
        cls,
        customer_name: str,
        customer_phone: str,
        wilaya: Wilaya,
        lines: list[tuple[Product, int]],
        address: str | None = None,
    ) -> "Order":
        """Build a pending order from resolved products, pricing it from current catalogue prices."""
        if not lines:
            raise ValidationError({"items": ["An order needs at least one item"]})

        now = utcnow()
        items = []
        for product, quantity in lines:
            if isinstance(quantity, bool) or not isinstance(quantity, int) or not 1 <= quantity <= MAX_QUANTITY:
                message = f"Quantity for product {product.id} must be between 1 and {MAX_QUANTITY}"
                raise ValidationError({"items": [message]})
            items.append(
                OrderLine(
                    id=new_id(),
                    product_id=product.id,
                    product=product,
                    quantity=quantity,
                    price=to_money(product.price),
                    created_at=now,
                )
            )

        try:
            subtotal = to_money(sum((item.line_total for item in items), Decimal("0")))
            delivery_price = to_money(wilaya.delivery_price)
            total = to_money(subtotal + delivery_price)
        except ValueError:
            raise ValidationError({"items": ["Order total is too large"]}) from None

        return cls(
            id=new_id(),
            customer_name=customer_name,
            customer_phone=customer_phone,
            wilaya_id=wilaya.id,
            wilaya=wilaya,
            address=address,
            subtotal=subtotal,
            delivery_price=delivery_price,
            total=total,
            status=OrderStatus.PENDING.value,
            items=items,
            created_at=now,
            updated_at=now,
        )

    def change_status(self, status: str) -> str:
        """Set a new status and return the previous one."""
        if status not in OrderStatus.values():
            raise ValidationError({"status": [f"Status must be one of: {', '.join(OrderStatus.values())}"]})

        previous = self.status
        self.status = status
        self.updated_at = utcnow()
        return previous

    def __repr__(self) -> str:
        return f"<Order {self.id} {self.status} total={self.total}>"
