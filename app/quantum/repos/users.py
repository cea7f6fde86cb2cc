from __future__ import annotations

from sqlalchemy import delete, func, or_, select

from app.quantum.db.models import User


class UserRepository:
    def __init__(self, db):
        self.db = db

    def get_by_id(self, user_id: int):
        return self.db.get(User, user_id)

    def get_by_email(self, email: str):
        stmt = select(User).where(func.lower(User.email) == email.strip().lower())
        return self.db.execute(stmt).scalars().first()

    def list(
        self,
        *,
        role: str | None = None,
        search: str | None = None,
        limit: int | None = None,
        offset: int | None = None,
        sort_by: str = "id",
        sort_order: str = "asc",
    ):
        stmt = select(User)
        count_stmt = select(func.count()).select_from(User)

        if role:
            normalized_role = role.strip().lower()
            stmt = stmt.where(func.lower(User.role) == normalized_role)
            count_stmt = count_stmt.where(func.lower(User.role) == normalized_role)

        if search:
            pattern = f"%{search.strip()}%"
            search_filter = or_(
                User.first_name.ilike(pattern),
                User.last_name.ilike(pattern),
                User.email.ilike(pattern),
            )
            stmt = stmt.where(search_filter)
            count_stmt = count_stmt.where(search_filter)

        sort_mapping = {
            "id": User.id,
            "last_name": User.last_name,
            "email": User.email,
            "created_at": User.created_at,
        }
        sort_column = sort_mapping.get(sort_by, User.id)
        stmt = stmt.order_by(sort_column.asc() if sort_order == "asc" else sort_column.desc())

        if offset:
            stmt = stmt.offset(offset)
        if limit:
            stmt = stmt.limit(limit)

        rows = self.db.execute(stmt).scalars().all()
        total = self.db.execute(count_stmt).scalar_one()
        return rows, total

    def create(self, user: User):
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user

    def update(self, user: User):
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user

    def delete(self, user: User) -> None:
        self.db.delete(user)
        self.db.commit()

    def delete_many(self, user_ids: list[int]) -> int:
        result = self.db.execute(delete(User).where(User.id.in_(user_ids)))
        self.db.commit()
        return result.rowcount or 0
