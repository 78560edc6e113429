"""FastAPI endpoints for delivery zones (wilayas)."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from delivery.api.schemas import UpdateDeliveryPriceRequest, WilayaResponse
from delivery.registry import DeliveryZoneRegistry
from identity.api.dependencies import require_admin
from shared.api import get_session

wilaya_router = APIRouter(prefix="/api/wilayas", tags=["wilayas"])
admin_wilaya_router = APIRouter(
    prefix="/api/admin/wilayas",
    tags=["admin", "wilayas"],
    dependencies=[Depends(require_admin)],
)


@wilaya_router.get("", response_model=list[WilayaResponse])
def list_wilayas(session: Session = Depends(get_session)) -> list[WilayaResponse]:
    return [WilayaResponse.model_validate(w) for w in DeliveryZoneRegistry(session).list()]


@admin_wilaya_router.put("/{wilaya_id}/delivery-price", response_model=WilayaResponse)
def update_delivery_price(
    wilaya_id: str,
    body: UpdateDeliveryPriceRequest,
    session: Session = Depends(get_session),
) -> WilayaResponse:
    wilaya = DeliveryZoneRegistry(session).set_fee(wilaya_id, body.price)
    return WilayaResponse.model_validate(wilaya)
