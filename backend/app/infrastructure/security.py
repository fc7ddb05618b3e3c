"""Credentials — password hashing (passlib/bcrypt) and bearer tokens (python-jose).

Invariants:
    - Plain passwords are never stored or logged
    - Tokens carry the user id in "sub" and expire after jwt_expire_minutes
    - decode_access_token raises AuthenticationError, never JWTError

Design Decisions:
    - Admin flag is NOT trusted from the token: the API layer reloads the user
      so a revoked admin loses access on the next request
"""

from datetime import datetime, timedelta, timezone
from uuid import UUID

from jose import JWTError, jwt
from passlib.context import CryptContext

from app.config import get_settings
from app.core.errors import AuthenticationError

bcrypt_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    return bcrypt_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt_context.verify(password, password_hash)
    except ValueError:
        # Stored value is not a recognised hash
        return False


def create_access_token(user_id: UUID, expires_minutes: int | None = None) -> str:
    settings = get_settings()
    minutes = expires_minutes if expires_minutes is not None else settings.jwt_expire_minutes
    payload = {
        "sub": str(user_id),
        "exp": datetime.now(timezone.utc) + timedelta(minutes=minutes),
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> UUID:
    """Return the user id carried by a valid token."""
    settings = get_settings()
    try:
        payload = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm],
        )
        return UUID(payload["sub"])
    except (JWTError, KeyError, ValueError):
        raise AuthenticationError("Invalid or expired token")
