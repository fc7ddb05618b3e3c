"""Item Service — filtered listings, create/edit/delete, display-code assignment.

Invariants:
    - Listings are public; every mutation takes an explicit Actor
    - Edit/delete require owner-or-admin against the item's own creator
    - Display code = ITEM + zero-padded(items already in inventory + 1, 3)
    - total in ItemPage counts all matches before limit/offset
    - Deleting a missing item reports "Item not found." without raising

Design Decisions:
    - Filters compiled to SQL from core.item_listing rules (one definition of
      the stock buckets for SQL and in-memory checks)
    - Unscoped search also matches the parent inventory name via EXISTS
    - Display-code race (unique constraint) surfaces as ConcurrencyError; any
      other integrity failure propagates unchanged
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone

from sqlalchemy import func, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.authorization import ensure_can_modify
from app.core.domain_types import Actor, ItemSortKey
from app.core.errors import ConcurrencyError, ResourceNotFoundError
from app.core.item_listing import ItemFilter, next_display_code, stock_bounds
from app.models.inventory import Inventory
from app.models.item import Item
from app.schemas.item import ItemWrite
from app.services.persistence import commit_or_resolve_conflict

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 50

_DISPLAY_CODE_CONSTRAINT = "uq_items_inventory_display_code"


@dataclass
class ItemPage:
    items: list[Item]
    total: int


@dataclass
class ItemDeletion:
    """Outcome of a delete request, carrying the user-facing notice."""
    deleted: bool
    message: str
    inventory_id: int | None = None


_ORDERINGS = {
    ItemSortKey.QUANTITY: (Item.quantity.asc(),),
    ItemSortKey.PRICE: (Item.price.asc(),),
    ItemSortKey.DATE: (Item.created_at.desc(),),
    ItemSortKey.NAME: (Item.name.asc(),),
}


def build_item_conditions(item_filter: ItemFilter, inventory_id: int | None) -> list:
    """Translate an ItemFilter into SQL WHERE clauses."""
    conditions = []
    if inventory_id is not None:
        conditions.append(Item.inventory_id == inventory_id)

    term = item_filter.search_term
    if term:
        matches = [
            Item.name.icontains(term, autoescape=True),
            Item.description.icontains(term, autoescape=True),
            Item.sku.icontains(term, autoescape=True),
        ]
        if inventory_id is None:
            matches.append(
                Item.inventory.has(Inventory.name.icontains(term, autoescape=True)),
            )
        conditions.append(or_(*matches))

    if item_filter.category:
        conditions.append(Item.category == item_filter.category)

    if item_filter.stock is not None:
        lower, upper = stock_bounds(item_filter.stock)
        conditions.append(Item.quantity >= lower)
        if upper is not None:
            conditions.append(Item.quantity < upper)
    return conditions


def is_display_code_clash(error: IntegrityError) -> bool:
    """True when the violated constraint is the per-inventory display-code key.

    PostgreSQL reports the constraint name; SQLite reports the column list.
    """
    detail = str(error.orig)
    return (
        _DISPLAY_CODE_CONSTRAINT in detail
        or "items.inventory_id, items.display_code" in detail
    )


class ItemService:
    """Item access component."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_items(
        self,
        item_filter: ItemFilter,
        inventory_id: int | None = None,
        limit: int = DEFAULT_PAGE_SIZE,
        offset: int = 0,
    ) -> ItemPage:
        """Filtered, sorted page of items, globally or within one inventory."""
        if inventory_id is not None and await self.db.get(Inventory, inventory_id) is None:
            raise ResourceNotFoundError("Inventory", inventory_id)

        conditions = build_item_conditions(item_filter, inventory_id)
        total = await self.db.scalar(
            select(func.count()).select_from(Item).where(*conditions),
        )
        query = (
            select(Item)
            .where(*conditions)
            .order_by(*_ORDERINGS[item_filter.sort], Item.id.asc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.db.execute(query)
        return ItemPage(items=list(result.scalars().all()), total=total or 0)

    async def get_item(self, item_id: int) -> Item:
        item = await self.db.get(Item, item_id)
        if item is None:
            raise ResourceNotFoundError("Item", item_id)
        return item

    async def create_item(self, inventory_id: int, data: ItemWrite, actor: Actor) -> Item:
        inventory = await self.db.get(Inventory, inventory_id)
        if inventory is None:
            raise ResourceNotFoundError("Inventory", inventory_id)

        item = Item(
            inventory_id=inventory_id,
            name=data.name,
            description=data.description,
            quantity=data.quantity,
            price=data.price,
            category=data.category,
            sku=data.sku,
            display_code=await self._next_display_code(inventory_id),
            created_by=actor.user_id,
            created_at=datetime.now(timezone.utc),
        )
        item.inventory = inventory
        self.db.add(item)
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            if not is_display_code_clash(e):
                raise
            logger.error(
                f"Display code {item.display_code} taken concurrently",
                extra={"inventory_id": inventory_id, "user_id": actor.user_id},
            )
            raise ConcurrencyError(
                "Another item was added to this inventory at the same time; try again",
            )
        logger.info(
            f"Item '{item.name}' created as {item.display_code}",
            extra={
                "item_id": item.id, "inventory_id": inventory_id,
                "user_id": actor.user_id,
            },
        )
        return item

    async def update_item(self, item_id: int, data: ItemWrite, actor: Actor) -> Item:
        item = await self.get_item(item_id)
        ensure_can_modify(item.owner, actor, "edit", "Item", item_id)
        item.name = data.name
        item.description = data.description
        item.quantity = data.quantity
        item.price = data.price
        item.category = data.category
        item.sku = data.sku
        await commit_or_resolve_conflict(self.db, Item, "Item", item_id)
        logger.info(
            "Item updated", extra={"item_id": item_id, "user_id": actor.user_id},
        )
        return item

    async def delete_item(self, item_id: int, actor: Actor) -> ItemDeletion:
        item = await self.db.get(Item, item_id)
        if item is None:
            return ItemDeletion(deleted=False, message="Item not found.")
        ensure_can_modify(item.owner, actor, "delete", "Item", item_id)
        return await self.remove(item, actor)

    async def remove(self, item: Item, actor: Actor) -> ItemDeletion:
        """Unchecked delete; callers enforce permissions."""
        item_id, name, inventory_id = item.id, item.name, item.inventory_id
        await self.db.delete(item)
        await commit_or_resolve_conflict(self.db, Item, "Item", item_id)
        logger.info(
            f"Item '{name}' deleted",
            extra={
                "item_id": item_id, "inventory_id": inventory_id,
                "user_id": actor.user_id,
            },
        )
        return ItemDeletion(
            deleted=True,
            message=f"Item '{name}' has been deleted successfully.",
            inventory_id=inventory_id,
        )

    async def _next_display_code(self, inventory_id: int) -> str:
        result = await self.db.execute(
            select(Item.display_code).where(Item.inventory_id == inventory_id),
        )
        taken = frozenset(result.scalars().all())
        return next_display_code(len(taken), taken)
