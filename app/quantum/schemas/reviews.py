from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field, model_validator

ReviewType = Literal["product", "shop"]


class ReviewAuthor(BaseModel):
    id: int
    name: str
    avatar: str


class ReviewItem(BaseModel):
    id: int
    type: ReviewType
    rating: int
    comment: str
    created_at: datetime
    product_id: int | None = None
    product_name: str | None = None
    user: ReviewAuthor


class ReviewCreateRequest(BaseModel):
    type: ReviewType
    product_id: int | None = Field(None, ge=1)
    rating: int = Field(..., ge=1, le=5)
    comment: str = Field(..., min_length=1, max_length=5000)

    @model_validator(mode="after")
    def ensure_product_for_product_review(self):
        if self.type == "product" and self.product_id is None:
            raise ValueError("product_id is required for product reviews")
        return self


class ReviewUpdateRequest(BaseModel):
    rating: int = Field(..., ge=1, le=5)
    comment: str = Field(..., min_length=1, max_length=5000)


class ReviewResponse(BaseModel):
    review: ReviewItem
    trace_id: str


class ReviewListResponse(BaseModel):
    reviews: list[ReviewItem]
    total: int
    trace_id: str
