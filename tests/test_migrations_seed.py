import os
from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect, select
from sqlalchemy.orm import sessionmaker

from app.quantum.core.config import settings
from app.quantum.db.models import User
from app.quantum.db.seed import run_seed


def _run_migrations(database_url: str):
    os.environ["DATABASE_URL"] = database_url
    config = Config("alembic.ini")
    config.set_main_option("sqlalchemy.url", database_url)
    config.attributes["configure_logger"] = False
    command.upgrade(config, "head")


def test_migrations_apply(tmp_path: Path):
    database_url = f"sqlite+pysqlite:///{tmp_path / 'migrations.db'}"
    _run_migrations(database_url)

    inspector = inspect(create_engine(database_url, future=True))
    tables = set(inspector.get_table_names())

    assert {
        "categories",
        "products",
        "users",
        "orders",
        "order_items",
        "product_reviews",
        "shop_reviews",
    } <= tables
    user_indexes = [index["name"] for index in inspector.get_indexes("users")]
    assert "ix_users_email" in user_indexes


def test_seed_creates_superadmin_once(tmp_path: Path):
    database_url = f"sqlite+pysqlite:///{tmp_path / 'seed.db'}"
    _run_migrations(database_url)
    session_factory = sessionmaker(bind=create_engine(database_url, future=True), future=True)

    with session_factory() as db:
        run_seed(db)
        run_seed(db)
        admins = db.execute(select(User).where(User.email == settings.SUPERADMIN_EMAIL)).scalars().all()

    assert len(admins) == 1
    assert admins[0].role == "admin"
