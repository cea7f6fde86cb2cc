from fastapi import APIRouter, Depends, Query, Request

from app.quantum.core.deps import get_current_user, require_staff
from app.quantum.core.error_catalog import AppError, ErrorCatalog
from app.quantum.db.models import Category
from app.quantum.db.session import get_db
from app.quantum.repos.categories import CategoryRepository
from app.quantum.schemas.catalog import (
    CategoryCreateRequest,
    CategoryItem,
    CategoryListResponse,
    CategoryResponse,
    CategoryUpdateRequest,
)
from app.quantum.schemas.common import DeleteResponse

router = APIRouter()


def _category_item(repo: CategoryRepository, category: Category) -> CategoryItem:
    return CategoryItem(id=category.id, name=category.name, product_count=repo.count_products(category.id))


def _get_or_404(repo: CategoryRepository, category_id: int) -> Category:
    category = repo.get_by_id(category_id)
    if category is None:
        raise AppError(ErrorCatalog.RESOURCE_NOT_FOUND, details={"resource": "category", "id": category_id})
    return category


def _ensure_unique_name(repo: CategoryRepository, name: str, *, exclude_id: int | None = None) -> None:
    existing = repo.get_by_name(name)
    if existing is not None and existing.id != exclude_id:
        raise AppError(ErrorCatalog.CATEGORY_ALREADY_EXISTS, details={"name": name})


@router.get("/categories", response_model=CategoryListResponse)
async def list_categories(
    request: Request,
    search: str | None = Query(default=None),
    _user=Depends(get_current_user),
    db=Depends(get_db),
):
    repo = CategoryRepository(db)
    return CategoryListResponse(
        categories=[_category_item(repo, category) for category in repo.list_all(search=search)],
        trace_id=getattr(request.state, "trace_id", ""),
    )


@router.get("/categories/{category_id}", response_model=CategoryResponse)
async def get_category(request: Request, category_id: int, _user=Depends(get_current_user), db=Depends(get_db)):
    repo = CategoryRepository(db)
    category = _get_or_404(repo, category_id)
    return CategoryResponse(category=_category_item(repo, category), trace_id=getattr(request.state, "trace_id", ""))


@router.post("/categories", response_model=CategoryResponse, status_code=201)
async def create_category(
    request: Request,
    payload: CategoryCreateRequest,
    _staff=Depends(require_staff),
    db=Depends(get_db),
):
    repo = CategoryRepository(db)
    name = payload.name.strip()
    _ensure_unique_name(repo, name)
    category = repo.create(Category(name=name))
    return CategoryResponse(category=_category_item(repo, category), trace_id=getattr(request.state, "trace_id", ""))


@router.put("/categories/{category_id}", response_model=CategoryResponse)
async def update_category(
    request: Request,
    category_id: int,
    payload: CategoryUpdateRequest,
    _staff=Depends(require_staff),
    db=Depends(get_db),
):
    repo = CategoryRepository(db)
    category = _get_or_404(repo, category_id)
    name = payload.name.strip()
    _ensure_unique_name(repo, name, exclude_id=category.id)
    category.name = name
    category = repo.update(category)
    return CategoryResponse(category=_category_item(repo, category), trace_id=getattr(request.state, "trace_id", ""))


@router.delete("/categories/{category_id}", response_model=DeleteResponse)
async def delete_category(
    request: Request,
    category_id: int,
    _staff=Depends(require_staff),
    db=Depends(get_db),
):
    repo = CategoryRepository(db)
    category = _get_or_404(repo, category_id)
    in_use = repo.count_products(category.id)
    if in_use:
        raise AppError(ErrorCatalog.CATEGORY_IN_USE, details={"category_id": category.id, "product_count": in_use})
    repo.delete(category)
    return DeleteResponse(deleted=1, trace_id=getattr(request.state, "trace_id", ""))
