"""FastAPI endpoints for Ordering: storefront checkout, admin order management and analytics."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from identity.api.dependencies import require_admin
from ordering.analytics import summarize
from ordering.api.schemas import (
    AnalyticsResponse,
    CreateOrderRequest,
    OrderResponse,
    UpdateOrderStatusRequest,
)
from ordering.order.ledger import OrderLedger
from ordering.order.placement import OrderPlacementService
from shared.api import get_session

order_router = APIRouter(prefix="/api/orders", tags=["orders"])
admin_order_router = APIRouter(
    prefix="/api/admin/orders",
    tags=["admin", "orders"],
    dependencies=[Depends(require_admin)],
)
admin_analytics_router = APIRouter(
    prefix="/api/admin",
    tags=["admin", "analytics"],
    dependencies=[Depends(require_admin)],
)


# --- Storefront endpoints ---


@order_router.post("", status_code=201, response_model=OrderResponse)
def place_order(body: CreateOrderRequest, session: Session = Depends(get_session)) -> OrderResponse:
    order = OrderPlacementService(session).place_order(
        customer_name=body.customer_name,
        customer_phone=body.customer_phone,
        wilaya_id=body.wilaya_id,
        address=body.address,
        items=[item.model_dump() for item in body.items],
    )
    return OrderResponse.model_validate(order)


# --- Admin endpoints ---


@admin_order_router.get("", response_model=list[OrderResponse])
def list_orders(session: Session = Depends(get_session)) -> list[OrderResponse]:
    return [OrderResponse.model_validate(o) for o in OrderLedger(session).list()]


@admin_order_router.get("/{order_id}", response_model=OrderResponse)
def get_order(order_id: str, session: Session = Depends(get_session)) -> OrderResponse:
    return OrderResponse.model_validate(OrderLedger(session).get(order_id))


@admin_order_router.put("/{order_id}/status", response_model=OrderResponse)
def update_order_status(
    order_id: str,
    body: UpdateOrderStatusRequest,
    session: Session = Depends(get_session),
) -> OrderResponse:
    return OrderResponse.model_validate(OrderLedger(session).update_status(order_id, body.status))


@admin_analytics_router.get("/analytics", response_model=AnalyticsResponse)
def analytics(session: Session = Depends(get_session)) -> AnalyticsResponse:
    return AnalyticsResponse.model_validate(summarize(session))
