from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from app.quantum.db.models import ProductReview, ShopReview

REVIEW_MODELS = {
    "product": ProductReview,
    "shop": ShopReview,
}


class ReviewRepository:
    def __init__(self, db):
        self.db = db

    def get_by_id(self, review_type: str, review_id: int):
        model = REVIEW_MODELS[review_type]
        stmt = select(model).options(*self._load_options(model)).where(model.id == review_id)
        return self.db.execute(stmt).scalars().first()

    def list(self, review_type: str, *, rating: int | None = None, user_id: int | None = None):
        model = REVIEW_MODELS[review_type]
        stmt = select(model).options(*self._load_options(model))
        if rating is not None:
            stmt = stmt.where(model.rating == rating)
        if user_id is not None:
            stmt = stmt.where(model.user_id == user_id)
        stmt = stmt.order_by(model.created_at.desc(), model.id.desc())
        return self.db.execute(stmt).scalars().all()

    def save(self, review):
        self.db.add(review)
        self.db.commit()
        self.db.refresh(review)
        return review

    def delete(self, review) -> None:
        self.db.delete(review)
        self.db.commit()

    @staticmethod
    def _load_options(model):
        options = [selectinload(model.user)]
        if model is ProductReview:
            options.append(selectinload(ProductReview.product))
        return options
