"""Order Ledger — admin reads over placed orders and status changes."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from ordering.order.order import Order
from shared.exceptions import ObjectNotFoundError
from shared.logging import get_logger

logger = get_logger(__name__)


class OrderLedger:
    def __init__(self, session: Session):
        self.session = session

    def list(self) -> list[Order]:
        """All orders, newest first, with wilaya and lines loaded."""
        return list(self.session.scalars(select(Order).order_by(Order.created_at.desc())).unique())

    def get(self, order_id: str) -> Order:
        order = self.session.get(Order, order_id)
        if order is None:
            raise ObjectNotFoundError(f"Order {order_id} not found")
        return order

    def update_status(self, order_id: str, status: str) -> Order:
        order = self.get(order_id)
        previous = order.change_status(status)
        self.session.commit()

        logger.info("order_status_changed", order_id=order.id, previous_status=previous, status=order.status)
        return order
