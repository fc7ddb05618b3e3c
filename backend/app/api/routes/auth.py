"""Auth Routes — registration, token issue and current-user lookup."""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependencies import get_current_user
from app.infrastructure.database import get_db
from app.infrastructure.security import create_access_token
from app.models.user import User
from app.schemas.user import LoginRequest, TokenResponse, UserRegister, UserResponse
from app.services.user_service import UserService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/auth", tags=["auth"])


@router.post(
    "/register", response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(body: UserRegister, db: AsyncSession = Depends(get_db)):
    user = await UserService(db).register(body)
    return UserResponse.model_validate(user)


@router.post("/token", response_model=TokenResponse)
async def issue_token(body: LoginRequest, db: AsyncSession = Depends(get_db)):
    user = await UserService(db).authenticate(body.email, body.password)
    return TokenResponse(access_token=create_access_token(user.id))


@router.get("/me", response_model=UserResponse)
async def me(user: User = Depends(get_current_user)):
    return UserResponse.model_validate(user)
