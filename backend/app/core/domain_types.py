"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId wraps UUID; InventoryId and ItemId wrap int
    - Ownership is explicit: OwnedBy(user_id) | Unowned — never a bare None
    - All listing options encoded as Enums — no raw string matching

Design Decisions:
    - NewType for ids: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON and parse from query strings without custom code
    - Actor is passed explicitly into every service call (no ambient current-user state)
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType, Union
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", UUID)
InventoryId = NewType("InventoryId", int)
ItemId = NewType("ItemId", int)


@dataclass(frozen=True)
class Actor:
    """The authenticated user performing an operation."""
    user_id: UserId
    is_admin: bool = False


# ─── Ownership ───────────────────────────────────────────────────

@dataclass(frozen=True)
class OwnedBy:
    """Resource created by a known user."""
    user_id: UserId


@dataclass(frozen=True)
class Unowned:
    """Resource with no recorded creator (seeded, or creator account removed)."""


Owner = Union[OwnedBy, Unowned]


def owner_of(created_by: UUID | None) -> Owner:
    """Lift a nullable creator column into the Owner sum type."""
    if created_by is None:
        return Unowned()
    return OwnedBy(UserId(created_by))


# ─── Enums ───────────────────────────────────────────────────────

class StockFilter(str, Enum):
    """Stock buckets used by item listings."""
    LOW = "low"
    OUT = "out"
    GOOD = "good"


class ItemSortKey(str, Enum):
    """Item listing order. NAME is the default."""
    QUANTITY = "quantity"
    PRICE = "price"
    DATE = "date"
    NAME = "name"


ADMIN_ROLE = "Admin"
