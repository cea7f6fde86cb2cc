from app.quantum.core.error_catalog import AppError, ErrorCatalog
from app.quantum.core.security import create_user_access_token, verify_password
from app.quantum.repos.users import UserRepository


class AuthService:
    def __init__(self, db):
        self.repo = UserRepository(db)

    def login(self, email: str, password: str):
        user = self.repo.get_by_email(email)
        if user is None or not verify_password(password, user.hashed_password):
            raise AppError(ErrorCatalog.INVALID_CREDENTIALS)
        return user, create_user_access_token(user)
