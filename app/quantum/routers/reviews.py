from fastapi import APIRouter, Depends, Query, Request

from app.quantum.core.deps import REVIEWER_ROLE, STAFF_ROLE, get_current_user
from app.quantum.core.error_catalog import AppError, ErrorCatalog
from app.quantum.db.models import ProductReview, ShopReview
from app.quantum.db.session import get_db
from app.quantum.repos.products import ProductRepository
from app.quantum.repos.reviews import ReviewRepository
from app.quantum.schemas.common import DeleteResponse
from app.quantum.schemas.reviews import (
    ReviewAuthor,
    ReviewCreateRequest,
    ReviewItem,
    ReviewListResponse,
    ReviewResponse,
    ReviewType,
    ReviewUpdateRequest,
)

router = APIRouter()

DEFAULT_AVATAR = "/default-avatar.png"


def review_item(review, review_type: str) -> ReviewItem:
    author = review.user
    product = getattr(review, "product", None)
    return ReviewItem(
        id=review.id,
        type=review_type,
        rating=review.rating,
        comment=review.comment,
        created_at=review.created_at,
        product_id=getattr(review, "product_id", None),
        product_name=product.name if product is not None else None,
        user=ReviewAuthor(
            id=author.id,
            name=f"{author.first_name} {author.last_name}".strip() or "Unknown User",
            avatar=author.profile_photo or DEFAULT_AVATAR,
        ),
    )


def _get_or_404(repo: ReviewRepository, review_type: str, review_id: int):
    review = repo.get_by_id(review_type, review_id)
    if review is None:
        raise AppError(ErrorCatalog.RESOURCE_NOT_FOUND, details={"resource": f"{review_type}_review", "id": review_id})
    return review


def _require_reviewer(user) -> None:
    if (user.role or "").lower() != REVIEWER_ROLE:
        raise AppError(ErrorCatalog.REVIEWER_ROLE_REQUIRED)


def _ensure_author(user, review) -> None:
    if review.user_id != user.id:
        raise AppError(ErrorCatalog.PERMISSION_DENIED, details={"message": "Review belongs to another account"})


@router.get("/reviews", response_model=ReviewListResponse)
async def list_reviews(
    request: Request,
    review_type: ReviewType | None = Query(default=None, alias="type"),
    rating: int | None = Query(default=None, ge=1, le=5),
    _user=Depends(get_current_user),
    db=Depends(get_db),
):
    repo = ReviewRepository(db)
    review_types = [review_type] if review_type else ["product", "shop"]
    items = [
        review_item(review, kind)
        for kind in review_types
        for review in repo.list(kind, rating=rating)
    ]
    items.sort(key=lambda item: item.created_at, reverse=True)
    return ReviewListResponse(reviews=items, total=len(items), trace_id=getattr(request.state, "trace_id", ""))


@router.get("/reviews/{review_type}/{review_id}", response_model=ReviewResponse)
async def get_review(
    request: Request,
    review_type: ReviewType,
    review_id: int,
    _user=Depends(get_current_user),
    db=Depends(get_db),
):
    review = _get_or_404(ReviewRepository(db), review_type, review_id)
    return ReviewResponse(review=review_item(review, review_type), trace_id=getattr(request.state, "trace_id", ""))


@router.post("/reviews", response_model=ReviewResponse, status_code=201)
async def create_review(
    request: Request,
    payload: ReviewCreateRequest,
    user=Depends(get_current_user),
    db=Depends(get_db),
):
    _require_reviewer(user)
    if payload.type == "product":
        if ProductRepository(db).get_by_id(payload.product_id) is None:
            raise AppError(
                ErrorCatalog.VALIDATION_ERROR,
                details={"field": "product_id", "message": "Product not found", "product_id": payload.product_id},
            )
        review = ProductReview(product_id=payload.product_id, user_id=user.id, rating=payload.rating, comment=payload.comment)
    else:
        review = ShopReview(user_id=user.id, rating=payload.rating, comment=payload.comment)

    repo = ReviewRepository(db)
    review = repo.save(review)
    review = repo.get_by_id(payload.type, review.id)
    return ReviewResponse(review=review_item(review, payload.type), trace_id=getattr(request.state, "trace_id", ""))


@router.put("/reviews/{review_type}/{review_id}", response_model=ReviewResponse)
async def update_review(
    request: Request,
    review_type: ReviewType,
    review_id: int,
    payload: ReviewUpdateRequest,
    user=Depends(get_current_user),
    db=Depends(get_db),
):
    _require_reviewer(user)
    repo = ReviewRepository(db)
    review = _get_or_404(repo, review_type, review_id)
    _ensure_author(user, review)
    review.rating = payload.rating
    review.comment = payload.comment
    repo.save(review)
    review = repo.get_by_id(review_type, review_id)
    return ReviewResponse(review=review_item(review, review_type), trace_id=getattr(request.state, "trace_id", ""))


@router.delete("/reviews/{review_type}/{review_id}", response_model=DeleteResponse)
async def delete_review(
    request: Request,
    review_type: ReviewType,
    review_id: int,
    user=Depends(get_current_user),
    db=Depends(get_db),
):
    repo = ReviewRepository(db)
    review = _get_or_404(repo, review_type, review_id)
    if (user.role or "").lower() != STAFF_ROLE:
        _require_reviewer(user)
        _ensure_author(user, review)
    repo.delete(review)
    return DeleteResponse(deleted=1, trace_id=getattr(request.state, "trace_id", ""))
