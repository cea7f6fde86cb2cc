from typing import Literal

from fastapi import APIRouter, Depends, Query, Request

from app.quantum.core.config import settings
from app.quantum.core.deps import get_current_user, require_staff
from app.quantum.core.error_catalog import AppError, ErrorCatalog
from app.quantum.db.models import Product
from app.quantum.db.session import get_db
from app.quantum.repos.categories import CategoryRepository
from app.quantum.repos.products import ProductRepository
from app.quantum.schemas.catalog import (
    ProductCreateRequest,
    ProductItem,
    ProductListResponse,
    ProductResponse,
    ProductUpdateRequest,
)
from app.quantum.schemas.common import BulkDeleteRequest, DeleteResponse, ListPaginationMeta

router = APIRouter()


def product_item(product: Product) -> ProductItem:
    return ProductItem(
        id=product.id,
        name=product.name,
        description=product.description or "",
        price=float(product.price),
        image_url=product.image_url or "",
        category_id=product.category_id,
        category_name=product.category.name if product.category is not None else None,
    )


def _get_or_404(repo: ProductRepository, product_id: int) -> Product:
    product = repo.get_by_id(product_id)
    if product is None:
        raise AppError(ErrorCatalog.RESOURCE_NOT_FOUND, details={"resource": "product", "id": product_id})
    return product


def _ensure_category(db, category_id: int) -> None:
    if CategoryRepository(db).get_by_id(category_id) is None:
        raise AppError(
            ErrorCatalog.VALIDATION_ERROR,
            details={"field": "category_id", "message": "Category not found", "category_id": category_id},
        )


@router.get("/products", response_model=ProductListResponse)
async def list_products(
    request: Request,
    search: str | None = Query(default=None),
    category_id: int | None = Query(default=None, ge=1),
    sort_by: Literal["id", "name", "price", "category_id"] = Query(default="id"),
    sort_order: Literal["asc", "desc"] = Query(default="asc"),
    limit: int | None = Query(default=None, ge=1),
    offset: int = Query(default=0, ge=0),
    _user=Depends(get_current_user),
    db=Depends(get_db),
):
    effective_limit = min(limit, settings.LIST_MAX_PAGE_SIZE) if limit else None
    rows, total = ProductRepository(db).list(
        search=search,
        category_id=category_id,
        limit=effective_limit,
        offset=offset,
        sort_by=sort_by,
        sort_order=sort_order,
    )
    return ProductListResponse(
        products=[product_item(product) for product in rows],
        pagination=ListPaginationMeta(total=total, count=len(rows), limit=effective_limit, offset=offset),
        trace_id=getattr(request.state, "trace_id", ""),
    )


@router.get("/products/{product_id}", response_model=ProductResponse)
async def get_product(request: Request, product_id: int, _user=Depends(get_current_user), db=Depends(get_db)):
    product = _get_or_404(ProductRepository(db), product_id)
    return ProductResponse(product=product_item(product), trace_id=getattr(request.state, "trace_id", ""))


@router.post("/products", response_model=ProductResponse, status_code=201)
async def create_product(
    request: Request,
    payload: ProductCreateRequest,
    _staff=Depends(require_staff),
    db=Depends(get_db),
):
    _ensure_category(db, payload.category_id)
    repo = ProductRepository(db)
    product = repo.create(
        Product(
            name=payload.name.strip(),
            description=payload.description,
            price=payload.price,
            image_url=payload.image_url,
            category_id=payload.category_id,
        )
    )
    product = repo.get_by_id(product.id)
    return ProductResponse(product=product_item(product), trace_id=getattr(request.state, "trace_id", ""))


@router.put("/products/{product_id}", response_model=ProductResponse)
async def update_product(
    request: Request,
    product_id: int,
    payload: ProductUpdateRequest,
    _staff=Depends(require_staff),
    db=Depends(get_db),
):
    repo = ProductRepository(db)
    product = _get_or_404(repo, product_id)
    changes = payload.model_dump(exclude_unset=True, exclude_none=True)
    if "category_id" in changes:
        _ensure_category(db, changes["category_id"])
    if "name" in changes:
        changes["name"] = changes["name"].strip()
    for field, value in changes.items():
        setattr(product, field, value)
    repo.update(product)
    product = repo.get_by_id(product_id)
    return ProductResponse(product=product_item(product), trace_id=getattr(request.state, "trace_id", ""))


@router.post("/products/bulk-delete", response_model=DeleteResponse)
async def bulk_delete_products(
    request: Request,
    payload: BulkDeleteRequest,
    _staff=Depends(require_staff),
    db=Depends(get_db),
):
    deleted = ProductRepository(db).delete_many(sorted(set(payload.ids)))
    return DeleteResponse(deleted=deleted, trace_id=getattr(request.state, "trace_id", ""))


@router.delete("/products/{product_id}", response_model=DeleteResponse)
async def delete_product(
    request: Request,
    product_id: int,
    _staff=Depends(require_staff),
    db=Depends(get_db),
):
    repo = ProductRepository(db)
    repo.delete(_get_or_404(repo, product_id))
    return DeleteResponse(deleted=1, trace_id=getattr(request.state, "trace_id", ""))
