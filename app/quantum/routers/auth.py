import logging
from urllib.parse import parse_qs

from fastapi import APIRouter, Depends, Request

from app.quantum.core.deps import get_current_user
from app.quantum.db.session import get_db
from app.quantum.routers.users import user_item
from app.quantum.schemas.auth import LoginRequest, OAuth2TokenResponse, TokenResponse
from app.quantum.schemas.users import UserResponse
from app.quantum.services.auth import AuthService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/auth/login",
    response_model=TokenResponse,
    summary="Login (JSON)",
    description="Login for the admin dashboard using email and password.",
)
async def login(request: Request, payload: LoginRequest, db=Depends(get_db)):
    user, token = AuthService(db).login(payload.email, payload.password)
    logger.info("Login succeeded", extra={"user_id": user.id, "role": user.role})
    return TokenResponse(
        access_token=token,
        user=user_item(user),
        trace_id=getattr(request.state, "trace_id", ""),
    )


@router.post(
    "/auth/token",
    response_model=OAuth2TokenResponse,
    summary="OAuth2 Token (Swagger/Auth)",
    description="OAuth2 Password Flow endpoint for Swagger Authorize using form-data username/password.",
)
async def oauth2_token(request: Request, db=Depends(get_db)):
    raw_body = (await request.body()).decode()
    form_data = parse_qs(raw_body)
    username = (form_data.get("username") or [""])[0]
    password = (form_data.get("password") or [""])[0]

    _, token = AuthService(db).login(username, password)
    return OAuth2TokenResponse(access_token=token)


@router.get("/users/current", response_model=UserResponse)
async def current_user(request: Request, user=Depends(get_current_user)):
    return UserResponse(user=user_item(user), trace_id=getattr(request.state, "trace_id", ""))
