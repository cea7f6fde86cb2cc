from datetime import datetime
from typing import Literal

from pydantic import BaseModel, EmailStr, Field

from app.quantum.schemas.common import ListPaginationMeta

UserRole = Literal["admin", "dmj", "auditeur"]
UserGender = Literal["homme", "femme", "autre"]


class UserCreateRequest(BaseModel):
    first_name: str = Field(..., min_length=1, max_length=150)
    last_name: str = Field(..., min_length=1, max_length=150)
    email: EmailStr
    phone: str = Field(default="", max_length=50)
    address: str = Field(default="", max_length=500)
    gender: UserGender | None = None
    profile_photo: str = Field(default="", max_length=500)
    role: UserRole = "auditeur"
    password: str = Field(..., min_length=8, max_length=255)


class UserUpdateRequest(BaseModel):
    first_name: str | None = Field(None, min_length=1, max_length=150)
    last_name: str | None = Field(None, min_length=1, max_length=150)
    email: EmailStr | None = None
    phone: str | None = Field(None, max_length=50)
    address: str | None = Field(None, max_length=500)
    gender: UserGender | None = None
    profile_photo: str | None = Field(None, max_length=500)
    role: UserRole | None = None
    password: str | None = Field(None, min_length=8, max_length=255)


class UserItem(BaseModel):
    id: int
    first_name: str
    last_name: str
    email: str
    phone: str
    address: str
    gender: str | None
    profile_photo: str
    role: str
    created_at: datetime


class UserResponse(BaseModel):
    user: UserItem
    trace_id: str


class UserListResponse(BaseModel):
    users: list[UserItem]
    pagination: ListPaginationMeta
    trace_id: str
