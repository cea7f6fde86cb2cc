from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.orm import selectinload

from app.quantum.db.models import Order, OrderItem


class OrderRepository:
    def __init__(self, db):
        self.db = db

    def get_by_id(self, order_id: int):
        stmt = (
            select(Order)
            .options(selectinload(Order.items).selectinload(OrderItem.product), selectinload(Order.user))
            .where(Order.id == order_id)
        )
        return self.db.execute(stmt).scalars().first()

    def list(
        self,
        *,
        status: str | None = None,
        user_id: int | None = None,
        limit: int | None = None,
        offset: int | None = None,
        sort_order: str = "desc",
    ):
        stmt = select(Order).options(selectinload(Order.user))
        count_stmt = select(func.count()).select_from(Order)

        if status:
            stmt = stmt.where(Order.status == status)
            count_stmt = count_stmt.where(Order.status == status)

        if user_id is not None:
            stmt = stmt.where(Order.user_id == user_id)
            count_stmt = count_stmt.where(Order.user_id == user_id)

        stmt = stmt.order_by(Order.created_at.asc() if sort_order == "asc" else Order.created_at.desc(), Order.id.desc())

        if offset:
            stmt = stmt.offset(offset)
        if limit:
            stmt = stmt.limit(limit)

        rows = self.db.execute(stmt).scalars().all()
        total = self.db.execute(count_stmt).scalar_one()
        return rows, total

    def update(self, order: Order):
        self.db.add(order)
        self.db.commit()
        self.db.refresh(order)
        return order

    def delete(self, order: Order) -> None:
        self.db.delete(order)
        self.db.commit()
