"""FastAPI endpoints for the Catalogue: storefront reads, admin product and category writes."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from catalogue.api.schemas import (
    CategoryCreatedResponse,
    CategoryDeletedResponse,
    CreateCategoryRequest,
    CreateProductRequest,
    ProductResponse,
    UpdateProductRequest,
)
from catalogue.category.categories import CategoryCatalog
from catalogue.product.catalog import CatalogStore
from identity.api.dependencies import require_admin
from shared.api import MessageResponse, get_session

product_router = APIRouter(prefix="/api/products", tags=["products"])
admin_product_router = APIRouter(
    prefix="/api/admin/products",
    tags=["admin", "products"],
    dependencies=[Depends(require_admin)],
)
admin_category_router = APIRouter(
    prefix="/api/admin/categories",
    tags=["admin", "categories"],
    dependencies=[Depends(require_admin)],
)


# --- Storefront endpoints ---


@product_router.get("", response_model=list[ProductResponse])
def list_products(session: Session = Depends(get_session)) -> list[ProductResponse]:
    return [ProductResponse.model_validate(p) for p in CatalogStore(session).list()]


@product_router.get("/{product_id}", response_model=ProductResponse)
def get_product(product_id: str, session: Session = Depends(get_session)) -> ProductResponse:
    return ProductResponse.model_validate(CatalogStore(session).get(product_id))


# --- Admin product endpoints ---


@admin_product_router.post("", status_code=201, response_model=ProductResponse)
def create_product(body: CreateProductRequest, session: Session = Depends(get_session)) -> ProductResponse:
    product = CatalogStore(session).create(body.model_dump())
    return ProductResponse.model_validate(product)


@admin_product_router.put("/{product_id}", response_model=ProductResponse)
def update_product(
    product_id: str,
    body: UpdateProductRequest,
    session: Session = Depends(get_session),
) -> ProductResponse:
    product = CatalogStore(session).update(product_id, body.model_dump(exclude_unset=True))
    return ProductResponse.model_validate(product)


@admin_product_router.delete("/{product_id}", response_model=MessageResponse)
def delete_product(product_id: str, session: Session = Depends(get_session)) -> MessageResponse:
    CatalogStore(session).soft_delete(product_id)
    return MessageResponse(message="Product deleted successfully")


# --- Admin category endpoints ---


@admin_category_router.get("", response_model=list[str])
def list_categories(session: Session = Depends(get_session)) -> list[str]:
    return CategoryCatalog(session).list()


@admin_category_router.post("", status_code=201, response_model=CategoryCreatedResponse)
def create_category(
    body: CreateCategoryRequest,
    session: Session = Depends(get_session),
) -> CategoryCreatedResponse:
    label = CategoryCatalog(session).create(body.name)
    return CategoryCreatedResponse(category=label)


@admin_category_router.delete("/{category}", response_model=CategoryDeletedResponse)
def delete_category(category: str, session: Session = Depends(get_session)) -> CategoryDeletedResponse:
    updated = CategoryCatalog(session).delete(category)
    return CategoryDeletedResponse(products_updated=updated)
