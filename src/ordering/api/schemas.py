"""Pydantic request/response schemas for the Ordering API."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from catalogue.api.schemas import ProductResponse
from delivery.api.schemas import WilayaResponse
from ordering.order.order import MAX_QUANTITY

# --- Request Schemas ---


class OrderItemRequest(BaseModel):
    product_id: str = Field(..., min_length=1)
    quantity: int = Field(..., ge=1, le=MAX_QUANTITY)


class CreateOrderRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "customer_name": "Amina Benali",
                    "customer_phone": "0551234567",
                    "wilaya_id": "7d2c3b1e-5a0f-4c59-9a7e-2f1d8b6c4e10",
                    "address": "12 rue Didouche Mourad, Alger",
                    "items": [{"product_id": "0b6f1a2c-8e44-4d1e-b8b0-3a9d2c7f5e21", "quantity": 2}],
                }
            ]
        }
    }

    customer_name: str = Field(..., min_length=1)
    customer_phone: str = Field(..., min_length=1, max_length=20)
    wilaya_id: str = Field(..., min_length=1)
    address: str | None = None
    items: list[OrderItemRequest]


class UpdateOrderStatusRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"status": "confirmed"}]}}

    status: str


# --- Response Schemas ---


class OrderLineResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    product_id: str
    quantity: int
    price: Decimal
    line_total: Decimal
    product: ProductResponse | None = None


class OrderResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    customer_name: str
    customer_phone: str
    wilaya_id: str
    address: str | None = None
    subtotal: Decimal
    delivery_price: Decimal
    total: Decimal
    status: str
    created_at: datetime | None = None
    updated_at: datetime | None = None
    wilaya: WilayaResponse | None = None
    items: list[OrderLineResponse] = Field(default_factory=list)


class AnalyticsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    total_products: int
    total_orders: int
    pending_orders: int
    total_revenue: Decimal
