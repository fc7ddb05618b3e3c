"""Request Dependencies — database session and acting-user resolution.

Invariants:
    - Protected routes depend on get_actor; a missing/invalid token => 401, never a crash
    - The Actor is rebuilt from the database on every request (admin flag is fresh)
    - Services receive the Actor as an argument; nothing reads identity globally
"""

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import Actor
from app.core.errors import AuthenticationError
from app.infrastructure.database import get_db
from app.infrastructure.security import decode_access_token
from app.models.user import User
from app.services.user_service import actor_for

bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: AsyncSession = Depends(get_db),
) -> User:
    if credentials is None or not credentials.credentials:
        raise AuthenticationError()
    user_id = decode_access_token(credentials.credentials)
    user = await db.get(User, user_id)
    if user is None:
        raise AuthenticationError("Account no longer exists")
    return user


async def get_actor(user: User = Depends(get_current_user)) -> Actor:
    return actor_for(user)
