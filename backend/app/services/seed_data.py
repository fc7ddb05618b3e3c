"""Seed Data — optional demo inventories and bootstrap admin account.

Invariants:
    - Demo data inserted only when the inventories table is empty
    - Office Supplies items get generated ITEM00n codes; others keep fixed codes
    - Bootstrap admin is created once (matched by email) with the Admin role
    - Seeded inventories/items are Unowned (admins only may modify them)
"""

import logging
from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import ADMIN_ROLE
from app.core.item_listing import format_display_code
from app.infrastructure.security import hash_password
from app.models.inventory import Inventory
from app.models.item import Item
from app.models.user import User
from app.models.user_role import UserRole

logger = logging.getLogger(__name__)

# (name, description, quantity, price, code or None for generated, category, sku)
_SAMPLE_INVENTORIES: list[tuple[str, str, list[tuple]]] = [
    (
        "Office Supplies", "General office supplies and equipment",
        [
            ("Ballpoint Pens (Black)", "Pack of 12 black ballpoint pens", 50, "8.99", None, "Office Supplies", "PEN-001"),
            ("A4 Copy Paper", "500 sheets of white A4 copy paper", 25, "12.99", None, "Office Supplies", "PAPER-001"),
            ("Stapler", "Heavy-duty metal stapler", 8, "24.99", None, "Office Supplies", "STAPLER-001"),
            ("Sticky Notes", "Yellow 3x3 inch sticky notes, pack of 12", 15, "6.49", None, "Office Supplies", "NOTES-001"),
        ],
    ),
    (
        "Electronics", "Computer equipment and electronic devices",
        [
            ("Wireless Mouse", "Ergonomic wireless optical mouse", 12, "29.99", "MOUSE001", "Computer Accessories", "MOUSE-WL-001"),
            ("USB-C Cable", "3-foot USB-C to USB-A cable", 20, "15.99", "CABLE001", "Cables", "CABLE-USBC-001"),
            ("Bluetooth Headphones", "Noise-cancelling wireless headphones", 5, "149.99", "AUDIO001", "Audio Equipment", "HEADPHONE-BT-001"),
            ("Laptop Stand", "Adjustable aluminum laptop stand", 3, "79.99", "STAND001", "Computer Accessories", "STAND-LP-001"),
        ],
    ),
    (
        "Warehouse Storage", "Large items and bulk storage",
        [
            ("Storage Boxes (Large)", "Heavy-duty cardboard storage boxes", 100, "4.99", "BOX001", "Storage", "BOX-LG-001"),
            ("Bubble Wrap", "500ft roll of bubble wrap", 15, "39.99", "WRAP001", "Packaging", "WRAP-BB-001"),
        ],
    ),
]


async def seed_demo_data(db: AsyncSession) -> bool:
    """Insert sample inventories when none exist. Returns True if data was added."""
    existing = await db.scalar(select(func.count()).select_from(Inventory))
    if existing:
        return False

    now = datetime.now(timezone.utc)
    for name, description, rows in _SAMPLE_INVENTORIES:
        inventory = Inventory(name=name, description=description, created_at=now, items=[])
        for index, (item_name, item_desc, quantity, price, code, category, sku) in enumerate(rows):
            inventory.items.append(Item(
                name=item_name,
                description=item_desc,
                quantity=quantity,
                price=Decimal(price),
                display_code=code or format_display_code(index + 1),
                category=category,
                sku=sku,
                created_at=now,
            ))
        db.add(inventory)
        logger.info(f"Seeding '{name}' with {len(rows)} items")
    await db.commit()
    return True


async def ensure_admin_account(
    db: AsyncSession, email: str, password: str,
    first_name: str = "Site", last_name: str = "Administrator",
) -> User:
    """Create the bootstrap admin if no account uses this email."""
    result = await db.execute(select(User).where(User.email == email.lower()))
    user = result.scalar_one_or_none()
    if user is not None:
        return user
    user = User(
        first_name=first_name,
        last_name=last_name,
        email=email.lower(),
        password_hash=hash_password(password),
        is_admin=True,
        created_at=datetime.now(timezone.utc),
        roles=[UserRole(role_name=ADMIN_ROLE)],
    )
    db.add(user)
    await db.commit()
    logger.info("Bootstrap admin account created", extra={"user_id": user.id})
    return user
