"""Pydantic request/response schemas for the Delivery API."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict


class UpdateDeliveryPriceRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"price": 450}]}}

    price: Decimal


class WilayaResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    code: str
    name: str
    delivery_price: Decimal
    created_at: datetime | None = None
    updated_at: datetime | None = None
