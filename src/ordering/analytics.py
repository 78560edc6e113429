"""Dashboard figures for the admin panel."""

from dataclasses import dataclass
from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from catalogue.product.product import Product
from ordering.order.order import Order, OrderStatus
from shared.money import to_money


@dataclass(frozen=True)
class AnalyticsSummary:
    total_products: int
    total_orders: int
    pending_orders: int
    total_revenue: Decimal


def summarize(session: Session) -> AnalyticsSummary:
    """Counts plus revenue; only delivered orders count as revenue."""
    total_products = session.scalar(select(func.count()).select_from(Product).where(Product.is_active.is_(True)))
    total_orders = session.scalar(select(func.count()).select_from(Order))
    pending_orders = session.scalar(
        select(func.count()).select_from(Order).where(Order.status == OrderStatus.PENDING.value)
    )
    revenue = session.scalar(
        select(func.coalesce(func.sum(Order.total), 0)).where(Order.status == OrderStatus.DELIVERED.value)
    )

    return AnalyticsSummary(
        total_products=total_products or 0,
        total_orders=total_orders or 0,
        pending_orders=pending_orders or 0,
        total_revenue=to_money(revenue or 0, limit=None),
    )
