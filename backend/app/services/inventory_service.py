"""Inventory Service — list, search, create, edit and delete inventories.

Invariants:
    - Reads are public; every mutation takes an explicit Actor
    - Edit/delete require owner-or-admin (PermissionDeniedError otherwise)
    - created_by and created_at are stamped once on create, never touched by edit
    - Delete removes the inventory and all its items in a single commit

Design Decisions:
    - Search runs in SQL (case-insensitive substring, wildcards escaped)
    - Cascade relies on the loaded items collection (delete-orphan) so children
      and parent go out in one flush
"""

import logging
from datetime import datetime, timezone

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.authorization import ensure_can_modify
from app.core.domain_types import Actor
from app.core.errors import ResourceNotFoundError
from app.models.inventory import Inventory
from app.schemas.inventory import InventoryWrite
from app.services.persistence import commit_or_resolve_conflict

logger = logging.getLogger(__name__)


class InventoryService:
    """Inventory access component."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_inventories(self, search: str | None = None) -> list[Inventory]:
        """All inventories (items loaded), optionally filtered by name/description."""
        query = select(Inventory).order_by(Inventory.name, Inventory.id)
        term = search.strip() if search else ""
        if term:
            query = query.where(
                or_(
                    Inventory.name.icontains(term, autoescape=True),
                    Inventory.description.icontains(term, autoescape=True),
                ),
            )
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def get_inventory(self, inventory_id: int) -> Inventory:
        inventory = await self.db.get(Inventory, inventory_id)
        if inventory is None:
            raise ResourceNotFoundError("Inventory", inventory_id)
        return inventory

    async def create_inventory(self, data: InventoryWrite, actor: Actor) -> Inventory:
        inventory = Inventory(
            name=data.name,
            description=data.description,
            created_by=actor.user_id,
            created_at=datetime.now(timezone.utc),
            items=[],
        )
        self.db.add(inventory)
        await self.db.commit()
        logger.info(
            f"Inventory '{inventory.name}' created",
            extra={"inventory_id": inventory.id, "user_id": actor.user_id},
        )
        return inventory

    async def update_inventory(
        self, inventory_id: int, data: InventoryWrite, actor: Actor,
    ) -> Inventory:
        inventory = await self.get_inventory(inventory_id)
        ensure_can_modify(inventory.owner, actor, "edit", "Inventory", inventory_id)
        inventory.name = data.name
        inventory.description = data.description
        await commit_or_resolve_conflict(self.db, Inventory, "Inventory", inventory_id)
        logger.info(
            "Inventory updated",
            extra={"inventory_id": inventory_id, "user_id": actor.user_id},
        )
        return inventory

    async def delete_inventory(self, inventory_id: int, actor: Actor) -> str:
        """Delete an inventory and its items. Returns the deleted name."""
        inventory = await self.get_inventory(inventory_id)
        ensure_can_modify(inventory.owner, actor, "delete", "Inventory", inventory_id)
        return await self.remove(inventory, actor)

    async def remove(self, inventory: Inventory, actor: Actor) -> str:
        """Unchecked cascade delete; callers enforce permissions."""
        name, inventory_id, item_count = inventory.name, inventory.id, len(inventory.items)
        await self.db.delete(inventory)
        await commit_or_resolve_conflict(self.db, Inventory, "Inventory", inventory_id)
        logger.info(
            f"Inventory '{name}' deleted with its items",
            extra={
                "inventory_id": inventory_id, "user_id": actor.user_id,
                "count": item_count,
            },
        )
        return name
