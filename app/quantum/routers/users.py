from fastapi import APIRouter, Depends, Query, Request

from app.quantum.core.config import settings
from app.quantum.core.deps import require_staff
from app.quantum.core.error_catalog import AppError, ErrorCatalog
from app.quantum.core.security import get_password_hash
from app.quantum.db.models import User
from app.quantum.db.session import get_db
from app.quantum.repos.users import UserRepository
from app.quantum.schemas.common import BulkDeleteRequest, DeleteResponse, ListPaginationMeta
from app.quantum.schemas.users import (
    UserCreateRequest,
    UserItem,
    UserListResponse,
    UserResponse,
    UserRole,
    UserUpdateRequest,
)

router = APIRouter()


def user_item(user: User) -> UserItem:
    return UserItem(
        id=user.id,
        first_name=user.first_name,
        last_name=user.last_name,
        email=user.email,
        phone=user.phone or "",
        address=user.address or "",
        gender=user.gender,
        profile_photo=user.profile_photo or "",
        role=user.role,
        created_at=user.created_at,
    )


def _get_or_404(repo: UserRepository, user_id: int) -> User:
    user = repo.get_by_id(user_id)
    if user is None:
        raise AppError(ErrorCatalog.RESOURCE_NOT_FOUND, details={"resource": "user", "id": user_id})
    return user


def _ensure_unique_email(repo: UserRepository, email: str, *, exclude_id: int | None = None) -> None:
    existing = repo.get_by_email(email)
    if existing is not None and existing.id != exclude_id:
        raise AppError(ErrorCatalog.EMAIL_ALREADY_EXISTS, details={"email": email})


@router.get("/users", response_model=UserListResponse)
async def list_users(
    request: Request,
    search: str | None = Query(default=None),
    role: UserRole | None = Query(default=None),
    limit: int | None = Query(default=None, ge=1),
    offset: int = Query(default=0, ge=0),
    _staff=Depends(require_staff),
    db=Depends(get_db),
):
    effective_limit = min(limit, settings.LIST_MAX_PAGE_SIZE) if limit else None
    rows, total = UserRepository(db).list(role=role, search=search, limit=effective_limit, offset=offset)
    return UserListResponse(
        users=[user_item(user) for user in rows],
        pagination=ListPaginationMeta(total=total, count=len(rows), limit=effective_limit, offset=offset),
        trace_id=getattr(request.state, "trace_id", ""),
    )


@router.get("/users/{user_id}", response_model=UserResponse)
async def get_user(request: Request, user_id: int, _staff=Depends(require_staff), db=Depends(get_db)):
    user = _get_or_404(UserRepository(db), user_id)
    return UserResponse(user=user_item(user), trace_id=getattr(request.state, "trace_id", ""))


@router.post("/users", response_model=UserResponse, status_code=201)
async def create_user(
    request: Request,
    payload: UserCreateRequest,
    _staff=Depends(require_staff),
    db=Depends(get_db),
):
    repo = UserRepository(db)
    _ensure_unique_email(repo, payload.email)
    data = payload.model_dump(exclude={"password"})
    user = repo.create(User(**data, hashed_password=get_password_hash(payload.password)))
    return UserResponse(user=user_item(user), trace_id=getattr(request.state, "trace_id", ""))


@router.put("/users/{user_id}", response_model=UserResponse)
async def update_user(
    request: Request,
    user_id: int,
    payload: UserUpdateRequest,
    _staff=Depends(require_staff),
    db=Depends(get_db),
):
    repo = UserRepository(db)
    user = _get_or_404(repo, user_id)
    changes = payload.model_dump(exclude_unset=True, exclude_none=True)
    password = changes.pop("password", None)
    if "email" in changes:
        _ensure_unique_email(repo, changes["email"], exclude_id=user.id)
    for field, value in changes.items():
        setattr(user, field, value)
    if password:
        user.hashed_password = get_password_hash(password)
    user = repo.update(user)
    return UserResponse(user=user_item(user), trace_id=getattr(request.state, "trace_id", ""))


@router.post("/users/bulk-delete", response_model=DeleteResponse)
async def bulk_delete_users(
    request: Request,
    payload: BulkDeleteRequest,
    staff=Depends(require_staff),
    db=Depends(get_db),
):
    ids = sorted(set(payload.ids))
    if staff.id in ids:
        raise AppError(ErrorCatalog.VALIDATION_ERROR, details={"message": "Cannot delete the current account"})
    deleted = UserRepository(db).delete_many(ids)
    return DeleteResponse(deleted=deleted, trace_id=getattr(request.state, "trace_id", ""))


@router.delete("/users/{user_id}", response_model=DeleteResponse)
async def delete_user(
    request: Request,
    user_id: int,
    staff=Depends(require_staff),
    db=Depends(get_db),
):
    if staff.id == user_id:
        raise AppError(ErrorCatalog.VALIDATION_ERROR, details={"message": "Cannot delete the current account"})
    repo = UserRepository(db)
    repo.delete(_get_or_404(repo, user_id))
    return DeleteResponse(deleted=1, trace_id=getattr(request.state, "trace_id", ""))
