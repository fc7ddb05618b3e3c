"""User Service — registration, credential checks and user lookup.

Invariants:
    - Emails are unique case-insensitively (stored lower-cased)
    - New accounts are never admins; only another admin can grant the flag
    - Authentication failures never reveal whether the email exists
"""

import logging
from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import Actor, UserId
from app.core.errors import AuthenticationError, DuplicateEmailError, ResourceNotFoundError
from app.infrastructure.security import hash_password, verify_password
from app.models.user import User
from app.schemas.user import UserRegister

logger = logging.getLogger(__name__)


def actor_for(user: User) -> Actor:
    return Actor(user_id=UserId(user.id), is_admin=user.is_admin)


class UserService:

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_user(self, user_id: UUID) -> User:
        user = await self.db.get(User, user_id)
        if user is None:
            raise ResourceNotFoundError("User", user_id)
        return user

    async def find_by_email(self, email: str) -> User | None:
        result = await self.db.execute(
            select(User).where(User.email == email.lower()),
        )
        return result.scalar_one_or_none()

    async def register(self, data: UserRegister) -> User:
        if await self.find_by_email(data.email) is not None:
            raise DuplicateEmailError(data.email)
        user = User(
            first_name=data.first_name,
            last_name=data.last_name,
            email=data.email,
            password_hash=hash_password(data.password),
            is_admin=False,
            created_at=datetime.now(timezone.utc),
            roles=[],
        )
        self.db.add(user)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            raise DuplicateEmailError(data.email)
        logger.info("User registered", extra={"user_id": user.id})
        return user

    async def authenticate(self, email: str, password: str) -> User:
        user = await self.find_by_email(email)
        if user is None or not verify_password(password, user.password_hash):
            logger.warning("Failed login attempt")
            raise AuthenticationError("Invalid email or password")
        return user
