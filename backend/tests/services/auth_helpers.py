"""Auth helpers for route tests — bearer headers for fixture users."""

from app.infrastructure.security import create_access_token
from app.models.user import User

TEST_PASSWORD = "correct-horse-battery"


def auth_headers(user: User) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(user.id)}"}
