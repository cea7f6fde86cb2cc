from __future__ import annotations

from sqlalchemy import delete, func, or_, select
from sqlalchemy.orm import selectinload

from app.quantum.db.models import Product


class ProductRepository:
    def __init__(self, db):
        self.db = db

    def get_by_id(self, product_id: int):
        stmt = select(Product).options(selectinload(Product.category)).where(Product.id == product_id)
        return self.db.execute(stmt).scalars().first()

    def list(
        self,
        *,
        search: str | None = None,
        category_id: int | None = None,
        limit: int | None = None,
        offset: int | None = None,
        sort_by: str = "id",
        sort_order: str = "asc",
    ):
        stmt = select(Product).options(selectinload(Product.category))
        count_stmt = select(func.count()).select_from(Product)

        if search:
            pattern = f"%{search.strip()}%"
            search_filter = or_(Product.name.ilike(pattern), Product.description.ilike(pattern))
            stmt = stmt.where(search_filter)
            count_stmt = count_stmt.where(search_filter)

        if category_id is not None:
            stmt = stmt.where(Product.category_id == category_id)
            count_stmt = count_stmt.where(Product.category_id == category_id)

        sort_mapping = {
            "id": Product.id,
            "name": Product.name,
            "price": Product.price,
            "category_id": Product.category_id,
        }
        sort_column = sort_mapping.get(sort_by, Product.id)
        stmt = stmt.order_by(sort_column.asc() if sort_order == "asc" else sort_column.desc())

        if offset:
            stmt = stmt.offset(offset)
        if limit:
            stmt = stmt.limit(limit)

        rows = self.db.execute(stmt).scalars().all()
        total = self.db.execute(count_stmt).scalar_one()
        return rows, total

    def create(self, product: Product):
        self.db.add(product)
        self.db.commit()
        self.db.refresh(product)
        return product

    def update(self, product: Product):
        self.db.add(product)
        self.db.commit()
        self.db.refresh(product)
        return product

    def delete(self, product: Product) -> None:
        self.db.delete(product)
        self.db.commit()

    def delete_many(self, product_ids: list[int]) -> int:
        result = self.db.execute(delete(Product).where(Product.id.in_(product_ids)))
        self.db.commit()
        return result.rowcount or 0
