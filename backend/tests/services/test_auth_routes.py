"""Auth Routes — registration, token issue, current user, token rejection."""

from app.infrastructure.security import create_access_token
from tests.services.auth_helpers import TEST_PASSWORD, auth_headers

_REGISTRATION = {
    "first_name": "Nina",
    "last_name": "Newcomer",
    "email": "Nina@Example.com",
    "password": "a-long-password",
}


async def test_register_creates_non_admin_user(client):
    res = await client.post("/api/v1/auth/register", json=_REGISTRATION)
    assert res.status_code == 201
    body = res.json()
    assert body["email"] == "nina@example.com"
    assert body["full_name"] == "Nina Newcomer"
    assert body["is_admin"] is False
    assert "password" not in body and "password_hash" not in body


async def test_register_duplicate_email_is_409(client):
    await client.post("/api/v1/auth/register", json=_REGISTRATION)
    res = await client.post(
        "/api/v1/auth/register", json={**_REGISTRATION, "email": "NINA@example.com"},
    )
    assert res.status_code == 409
    assert res.json()["error"]["code"] == "DUPLICATE_EMAIL"


async def test_register_rejects_short_password(client):
    res = await client.post(
        "/api/v1/auth/register", json={**_REGISTRATION, "password": "short"},
    )
    assert res.status_code == 400


async def test_register_then_login(client):
    await client.post("/api/v1/auth/register", json=_REGISTRATION)
    res = await client.post(
        "/api/v1/auth/token",
        json={"email": "nina@example.com", "password": "a-long-password"},
    )
    assert res.status_code == 200
    assert res.json()["token_type"] == "bearer"

    token = res.json()["access_token"]
    me = await client.get("/api/v1/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert me.json()["email"] == "nina@example.com"


async def test_login_with_fixture_user(client, owner):
    res = await client.post(
        "/api/v1/auth/token", json={"email": owner.email, "password": TEST_PASSWORD},
    )
    assert res.status_code == 200


async def test_wrong_password_is_401(client, owner):
    res = await client.post(
        "/api/v1/auth/token", json={"email": owner.email, "password": "wrong-password"},
    )
    assert res.status_code == 401
    assert res.json()["error"]["message"] == "Invalid email or password"


async def test_unknown_email_gives_same_error(client):
    res = await client.post(
        "/api/v1/auth/token", json={"email": "ghost@example.com", "password": "whatever1"},
    )
    assert res.status_code == 401
    assert res.json()["error"]["message"] == "Invalid email or password"


async def test_me_requires_token(client):
    res = await client.get("/api/v1/auth/me")
    assert res.status_code == 401
    assert res.headers["www-authenticate"] == "Bearer"


async def test_garbage_token_is_401(client):
    res = await client.get(
        "/api/v1/auth/me", headers={"Authorization": "Bearer not-a-token"},
    )
    assert res.status_code == 401


async def test_expired_token_is_401(client, owner):
    token = create_access_token(owner.id, expires_minutes=-1)
    res = await client.get("/api/v1/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert res.status_code == 401


async def test_me_returns_current_user(client, admin_user):
    res = await client.get("/api/v1/auth/me", headers=auth_headers(admin_user))
    assert res.json()["role_names"] == ["Admin"]
