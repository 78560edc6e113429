"""Order Placement Service — turns a storefront cart into a persisted order.

Everything that can be rejected is checked before the first write: the cart
shape, the wilaya, then every product. Prices come from the catalogue, never
from the client. The order and all of its lines are committed together or not
at all.

Stock is informational: it is neither checked nor decremented here, and a
soft-deleted product can still be ordered by id.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from catalogue.product.catalog import CatalogStore
from delivery.registry import DeliveryZoneRegistry
from ordering.order.order import MAX_QUANTITY, Order
from shared.exceptions import StorageError, ValidationError
from shared.logging import get_logger

logger = get_logger(__name__)

ORDER_CREATION_FAILED = "Failed to create order"


def _validate_items(items: Iterable[Mapping[str, Any]]) -> list[tuple[str, int]]:
    requested = []
    for index, item in enumerate(items or []):
        product_id = item.get("product_id")
        quantity = item.get("quantity")
        if not product_id:
            raise ValidationError({f"items.{index}.product_id": ["Product id is required"]})
        if isinstance(quantity, bool) or not isinstance(quantity, int) or not 1 <= quantity <= MAX_QUANTITY:
            message = f"Quantity must be a whole number between 1 and {MAX_QUANTITY}"
            raise ValidationError({f"items.{index}.quantity": [message]})
        requested.append((product_id, quantity))

    if not requested:
        raise ValidationError({"items": ["An order needs at least one item"]})
    return requested


class OrderPlacementService:
    def __init__(self, session: Session):
        self.session = session
        self.zones = DeliveryZoneRegistry(session)
        self.catalog = CatalogStore(session)

    def place_order(
        self,
        customer_name: str,
        customer_phone: str,
        wilaya_id: str,
        items: Iterable[Mapping[str, Any]],
        address: str | None = None,
    ) -> Order:
        requested = _validate_items(items)
        if not customer_name or not customer_name.strip():
            raise ValidationError({"customer_name": ["Customer name is required"]})
        if not customer_phone or not customer_phone.strip():
            raise ValidationError({"customer_phone": ["Customer phone is required"]})

        wilaya = self.zones.get(wilaya_id)
        lines = [(self.catalog.get(product_id), quantity) for product_id, quantity in requested]

        order = Order.place(
            customer_name=customer_name.strip(),
            customer_phone=customer_phone.strip(),
            wilaya=wilaya,
            lines=lines,
            address=address,
        )

        try:
            self.session.add(order)
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            logger.exception("order_persist_failed", wilaya_id=wilaya_id, item_count=len(requested))
            raise StorageError(ORDER_CREATION_FAILED) from None

        logger.info(
            "order_placed",
            order_id=order.id,
            wilaya_code=wilaya.code,
            item_count=len(order.items),
            subtotal=str(order.subtotal),
            total=str(order.total),
        )
        return order
