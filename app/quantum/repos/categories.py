from sqlalchemy import func, select

from app.quantum.db.models import Category, Product


class CategoryRepository:
    def __init__(self, db):
        self.db = db

    def get_by_id(self, category_id: int):
        return self.db.get(Category, category_id)

    def get_by_name(self, name: str):
        stmt = select(Category).where(func.lower(Category.name) == name.strip().lower())
        return self.db.execute(stmt).scalars().first()

    def list_all(self, *, search: str | None = None):
        stmt = select(Category)
        if search:
            stmt = stmt.where(Category.name.ilike(f"%{search.strip()}%"))
        stmt = stmt.order_by(Category.name.asc())
        return self.db.execute(stmt).scalars().all()

    def count_products(self, category_id: int) -> int:
        stmt = select(func.count()).select_from(Product).where(Product.category_id == category_id)
        return self.db.execute(stmt).scalar_one()

    def create(self, category: Category):
        self.db.add(category)
        self.db.commit()
        self.db.refresh(category)
        return category

    def update(self, category: Category):
        self.db.add(category)
        self.db.commit()
        self.db.refresh(category)
        return category

    def delete(self, category: Category) -> None:
        self.db.delete(category)
        self.db.commit()
