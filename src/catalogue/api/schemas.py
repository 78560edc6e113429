"""Pydantic request/response schemas for the Catalogue API."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

# --- Product Request Schemas ---


class CreateProductRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "T-shirt Casbah noir",
                    "description": "Coton peigné 180 g, sérigraphie Casbah d'Alger.",
                    "price": 2500,
                    "image_url": "https://cdn.wilaya-store.dz/casbah-noir.jpg",
                    "images": ["https://cdn.wilaya-store.dz/casbah-noir-dos.jpg"],
                    "sizes": ["S", "M", "L", "XL"],
                    "colors": ["noir"],
                    "stock": 40,
                    "category": "graphic",
                }
            ]
        }
    }

    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    price: Decimal
    image_url: str = Field(..., min_length=1)
    images: list[str] = Field(default_factory=list)
    sizes: list[str] = Field(default_factory=list)
    colors: list[str] = Field(default_factory=list)
    stock: int | None = 0
    is_active: bool = True
    category: str | None = Field(None, max_length=50)


class UpdateProductRequest(BaseModel):
    """Partial update; only fields present in the payload are applied."""

    model_config = {"json_schema_extra": {"examples": [{"price": 2300, "stock": 25}]}}

    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    price: Decimal | None = None
    image_url: str | None = Field(None, min_length=1)
    images: list[str] | None = None
    sizes: list[str] | None = None
    colors: list[str] | None = None
    stock: int | None = None
    is_active: bool | None = None
    category: str | None = Field(None, max_length=50)


# --- Category Request Schemas ---


class CreateCategoryRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"name": "Oversize"}]}}

    name: str = Field(..., min_length=1)


# --- Response Schemas ---


class ProductResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    description: str | None = None
    price: Decimal
    image_url: str
    images: list[str] = Field(default_factory=list)
    sizes: list[str] = Field(default_factory=list)
    colors: list[str] = Field(default_factory=list)
    stock: int | None = None
    is_active: bool
    category: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class CategoryCreatedResponse(BaseModel):
    message: str = "Category created successfully"
    category: str


class CategoryDeletedResponse(BaseModel):
    message: str = "Category deleted successfully"
    products_updated: int
