from fastapi import Depends
from jose import JWTError
from pydantic import ValidationError

from app.quantum.core.error_catalog import AppError, ErrorCatalog
from app.quantum.core.security import TokenData, decode_token, oauth2_scheme
from app.quantum.db.session import get_db
from app.quantum.repos.users import UserRepository

STAFF_ROLE = "admin"
REVIEWER_ROLE = "dmj"


def get_current_token_data(token: str | None = Depends(oauth2_scheme)) -> TokenData:
    if not token:
        raise AppError(ErrorCatalog.INVALID_TOKEN)
    try:
        payload = decode_token(token)
        return TokenData(**payload)
    except (JWTError, ValidationError, TypeError) as exc:
        raise AppError(ErrorCatalog.INVALID_TOKEN) from exc


def get_current_user(token_data: TokenData = Depends(get_current_token_data), db=Depends(get_db)):
    try:
        user_id = int(token_data.sub)
    except ValueError as exc:
        raise AppError(ErrorCatalog.INVALID_TOKEN) from exc

    user = UserRepository(db).get_by_id(user_id)
    if user is None:
        raise AppError(ErrorCatalog.INVALID_TOKEN)
    return user


def require_role(*roles: str):
    allowed = {role.lower() for role in roles}

    def dependency(user=Depends(get_current_user)):
        if (user.role or "").lower() not in allowed:
            raise AppError(ErrorCatalog.PERMISSION_DENIED, details={"required_roles": sorted(allowed)})
        return user

    return dependency


require_staff = require_role(STAFF_ROLE)


__all__ = [
    "REVIEWER_ROLE",
    "STAFF_ROLE",
    "get_current_token_data",
    "get_current_user",
    "require_role",
    "require_staff",
]
