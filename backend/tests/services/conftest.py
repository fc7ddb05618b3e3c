"""Service test fixtures — async DB, FastAPI test client, users and tokens.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB sessions
    - db_manager patched so health/readiness probes hit the test engine
    - Users are inserted directly; tokens minted with create_access_token

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
      (PostgreSQL-specific behaviour such as ON DELETE SET NULL not exercised here)
    - Pre-computed password hash shared by fixture users: bcrypt is slow by design
"""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from app.core.domain_types import ADMIN_ROLE
from app.db.base import Base
from app.infrastructure.database import get_db, DatabaseSessionManager
from app.infrastructure.security import hash_password
from app.models.inventory import Inventory
from app.models.item import Item
from app.models.user import User
from app.models.user_role import UserRole
import app.infrastructure.database as db_module
from app.main import app
from tests.services.auth_helpers import TEST_PASSWORD

_PASSWORD_HASH = hash_password(TEST_PASSWORD)


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def make_user(test_db):
    """Factory: insert a user (optionally admin) and return it."""
    counter = {"n": 0}

    async def _make(first_name="Test", last_name="User", email=None, is_admin=False):
        counter["n"] += 1
        user = User(
            first_name=first_name,
            last_name=last_name,
            email=email or f"user{counter['n']}@example.com",
            password_hash=_PASSWORD_HASH,
            is_admin=is_admin,
            created_at=datetime.now(timezone.utc) + timedelta(seconds=counter["n"]),
            roles=[UserRole(role_name=ADMIN_ROLE)] if is_admin else [],
        )
        test_db.add(user)
        await test_db.commit()
        return user

    return _make


@pytest.fixture
async def owner(make_user):
    return await make_user("Olivia", "Owner", "olivia@example.com")


@pytest.fixture
async def other_user(make_user):
    return await make_user("Oscar", "Other", "oscar@example.com")


@pytest.fixture
async def admin_user(make_user):
    return await make_user("Ada", "Admin", "ada@example.com", is_admin=True)


@pytest.fixture
def make_inventory(test_db):
    """Factory: insert an inventory with (name, quantity, price, category, sku) rows."""

    async def _make(name, owner=None, description=None, rows=()):
        now = datetime.now(timezone.utc)
        inventory = Inventory(
            name=name,
            description=description,
            created_by=owner.id if owner else None,
            created_at=now,
            items=[],
        )
        for index, (item_name, quantity, price, category, sku) in enumerate(rows):
            inventory.items.append(Item(
                name=item_name,
                quantity=quantity,
                price=Decimal(price),
                category=category,
                sku=sku,
                display_code=f"ITEM{index + 1:03d}",
                created_by=owner.id if owner else None,
                created_at=now + timedelta(seconds=index),
            ))
        test_db.add(inventory)
        await test_db.commit()
        return inventory

    return _make


@pytest.fixture
async def office_supplies(make_inventory, owner):
    """Owner's inventory with a mix of stock levels and prices."""
    return await make_inventory(
        "Office Supplies", owner, "General office supplies",
        rows=[
            ("Ballpoint Pens", 50, "8.99", "Stationery", "PEN-001"),
            ("Stapler", 5, "24.99", "Equipment", "STAPLER-001"),
            ("Sticky Notes", 0, "6.49", "Stationery", "NOTES-001"),
        ],
    )


@pytest.fixture
async def electronics(make_inventory, other_user):
    """Another user's inventory."""
    return await make_inventory(
        "Electronics", other_user, "Computer equipment",
        rows=[
            ("Wireless Mouse", 12, "29.99", "Accessories", "MOUSE-001"),
            ("Bluetooth Headphones", 5, "149.99", "Audio", "HEAD-001"),
        ],
    )
