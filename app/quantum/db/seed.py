from app.quantum.core.config import settings
from app.quantum.core.security import get_password_hash
from app.quantum.db.models import User
from app.quantum.repos.users import UserRepository


def _get_or_create_superadmin(db):
    repo = UserRepository(db)
    user = repo.get_by_email(settings.SUPERADMIN_EMAIL)
    if user:
        return user
    user = User(
        first_name="Super",
        last_name="Admin",
        email=settings.SUPERADMIN_EMAIL,
        role="admin",
        hashed_password=get_password_hash(settings.SUPERADMIN_PASSWORD),
    )
    db.add(user)
    db.flush()
    return user


def run_seed(db) -> None:
    _get_or_create_superadmin(db)
    db.commit()


if __name__ == "__main__":
    from app.quantum.db.session import SessionLocal

    with SessionLocal() as session:
        run_seed(session)
