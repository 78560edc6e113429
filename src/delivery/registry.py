"""Delivery Zone Registry — reads and reprices wilayas, seeds the table once."""

from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from delivery.seed import ALGERIAN_WILAYAS
from delivery.wilaya import Wilaya
from shared.exceptions import ObjectNotFoundError
from shared.logging import get_logger

logger = get_logger(__name__)


class DeliveryZoneRegistry:
    def __init__(self, session: Session):
        self.session = session

    def list(self) -> list[Wilaya]:
        return list(self.session.scalars(select(Wilaya).order_by(Wilaya.code)))

    def get(self, wilaya_id: str) -> Wilaya:
        wilaya = self.session.get(Wilaya, wilaya_id)
        if wilaya is None:
            raise ObjectNotFoundError(f"Wilaya {wilaya_id} not found")
        return wilaya

    def set_fee(self, wilaya_id: str, price) -> Wilaya:
        wilaya = self.get(wilaya_id)
        previous = wilaya.set_delivery_price(price)
        self.session.commit()

        logger.info(
            "delivery_price_updated",
            wilaya_code=wilaya.code,
            previous_price=str(previous),
            new_price=str(wilaya.delivery_price),
        )
        return wilaya

    def seed(self, reference=ALGERIAN_WILAYAS) -> int:
        """Insert the reference wilayas when the table is empty.

        Any existing row makes this a no-op; missing codes are never topped up.
        """
        existing = self.session.scalar(select(func.count()).select_from(Wilaya))
        if existing:
            logger.debug("wilaya_seed_skipped", existing=existing)
            return 0

        self.session.add_all(Wilaya.create(code=code, name=name, delivery_price=fee) for code, name, fee in reference)
        self.session.commit()

        logger.info("wilayas_seeded", count=len(reference))
        return len(reference)
