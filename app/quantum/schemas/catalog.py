from decimal import Decimal

from pydantic import BaseModel, Field

from app.quantum.schemas.common import ListPaginationMeta


class CategoryCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)


class CategoryUpdateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)


class CategoryItem(BaseModel):
    id: int
    name: str
    product_count: int = 0


class CategoryResponse(BaseModel):
    category: CategoryItem
    trace_id: str


class CategoryListResponse(BaseModel):
    categories: list[CategoryItem]
    trace_id: str


class ProductCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str = Field(default="", max_length=5000)
    price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    image_url: str = Field(default="", max_length=500)
    category_id: int = Field(..., ge=1)


class ProductUpdateRequest(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = Field(None, max_length=5000)
    price: Decimal | None = Field(None, ge=0, max_digits=10, decimal_places=2)
    image_url: str | None = Field(None, max_length=500)
    category_id: int | None = Field(None, ge=1)


class ProductItem(BaseModel):
    id: int
    name: str
    description: str
    price: float
    image_url: str
    category_id: int
    category_name: str | None = None


class ProductResponse(BaseModel):
    product: ProductItem
    trace_id: str


class ProductListResponse(BaseModel):
    products: list[ProductItem]
    pagination: ListPaginationMeta
    trace_id: str
