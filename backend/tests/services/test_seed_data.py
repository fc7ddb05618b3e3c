"""Seed Data — demo inventories and bootstrap admin.

Invariants:
    - Demo data only lands in an empty database
    - Office Supplies items get generated ITEM00n codes
    - Bootstrap admin is idempotent by email and carries the Admin role
"""

from sqlalchemy import func, select

from app.models.inventory import Inventory
from app.models.item import Item
from app.models.user import User
from app.services.seed_data import ensure_admin_account, seed_demo_data


async def test_seed_populates_empty_database(test_db):
    assert await seed_demo_data(test_db) is True
    assert await test_db.scalar(select(func.count()).select_from(Inventory)) == 3
    assert await test_db.scalar(select(func.count()).select_from(Item)) == 10


async def test_seeded_office_items_use_generated_codes(test_db):
    await seed_demo_data(test_db)
    result = await test_db.execute(
        select(Item.display_code).join(Inventory)
        .where(Inventory.name == "Office Supplies").order_by(Item.display_code),
    )
    assert list(result.scalars()) == ["ITEM001", "ITEM002", "ITEM003", "ITEM004"]


async def test_seed_is_skipped_when_inventories_exist(test_db, office_supplies):
    assert await seed_demo_data(test_db) is False
    assert await test_db.scalar(select(func.count()).select_from(Inventory)) == 1


async def test_seeded_inventories_are_unowned(test_db):
    await seed_demo_data(test_db)
    owners = await test_db.scalars(select(Inventory.created_by))
    assert set(owners) == {None}


async def test_bootstrap_admin_created_once(test_db):
    first = await ensure_admin_account(test_db, "Root@Example.com", "bootstrap-pass")
    second = await ensure_admin_account(test_db, "root@example.com", "other-pass")
    assert first.id == second.id
    assert first.is_admin is True
    assert first.role_names == ["Admin"]
    assert await test_db.scalar(select(func.count()).select_from(User)) == 1
