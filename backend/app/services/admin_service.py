"""Admin Service — user role toggling, global listings and deletions, dashboard.

Invariants:
    - Every operation requires actor.is_admin (AdminRequiredError otherwise)
    - An admin can never toggle their own flag (SelfRoleChangeError, nothing changes)
    - is_admin and the "Admin" user_roles row are always changed together
    - Admin deletes use the same cascade as owner deletes but skip ownership checks

Design Decisions:
    - Deletions delegate to InventoryService.remove / ItemService.remove so the
      cascade path is shared with owner deletes
"""

import logging
from dataclasses import dataclass
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import ADMIN_ROLE, Actor
from app.core.errors import AdminRequiredError, ResourceNotFoundError, SelfRoleChangeError
from app.models.inventory import Inventory
from app.models.item import Item
from app.models.user import User
from app.models.user_role import UserRole
from app.services.inventory_service import InventoryService
from app.services.item_service import ItemService

logger = logging.getLogger(__name__)

RECENT_LIMIT = 5


@dataclass
class Dashboard:
    total_users: int
    total_inventories: int
    total_items: int
    admin_users: int
    recent_users: list[User]
    recent_inventories: list[Inventory]
    recent_items: list[Item]


def require_admin(actor: Actor) -> None:
    if not actor.is_admin:
        logger.warning("Admin operation refused", extra={"user_id": actor.user_id})
        raise AdminRequiredError()


def sync_admin_role(user: User) -> None:
    """Make the user's Admin role membership match user.is_admin."""
    has_role = any(role.role_name == ADMIN_ROLE for role in user.roles)
    if user.is_admin and not has_role:
        user.roles.append(UserRole(role_name=ADMIN_ROLE))
    elif not user.is_admin and has_role:
        user.roles = [role for role in user.roles if role.role_name != ADMIN_ROLE]


class AdminService:
    """Admin component."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def toggle_admin(self, user_id: UUID, actor: Actor) -> tuple[User, str]:
        """Flip another user's admin flag. Returns the user and a notice."""
        require_admin(actor)
        user = await self.db.get(User, user_id)
        if user is None:
            raise ResourceNotFoundError("User", user_id)
        if user.id == actor.user_id:
            raise SelfRoleChangeError()

        user.is_admin = not user.is_admin
        sync_admin_role(user)
        await self.db.commit()
        logger.info(
            f"Admin status set to {user.is_admin}",
            extra={"user_id": actor.user_id, "target_user_id": user.id},
        )
        return user, f"{user.full_name} admin status updated."

    async def list_users(self, actor: Actor) -> list[User]:
        require_admin(actor)
        result = await self.db.execute(
            select(User).order_by(User.last_name, User.first_name),
        )
        return list(result.scalars().all())

    async def list_inventories(self, actor: Actor) -> list[Inventory]:
        require_admin(actor)
        result = await self.db.execute(
            select(Inventory).order_by(Inventory.name, Inventory.id),
        )
        return list(result.scalars().all())

    async def list_items(self, actor: Actor) -> list[Item]:
        require_admin(actor)
        result = await self.db.execute(select(Item).order_by(Item.name, Item.id))
        return list(result.scalars().all())

    async def delete_inventory(self, inventory_id: int, actor: Actor) -> str:
        require_admin(actor)
        inventories = InventoryService(self.db)
        inventory = await inventories.get_inventory(inventory_id)
        return await inventories.remove(inventory, actor)

    async def delete_item(self, item_id: int, actor: Actor) -> str:
        require_admin(actor)
        items = ItemService(self.db)
        item = await items.get_item(item_id)
        await items.remove(item, actor)
        return item.name

    async def dashboard(self, actor: Actor) -> Dashboard:
        require_admin(actor)
        return Dashboard(
            total_users=await self._count(User),
            total_inventories=await self._count(Inventory),
            total_items=await self._count(Item),
            admin_users=await self.db.scalar(
                select(func.count()).select_from(User).where(User.is_admin.is_(True)),
            ) or 0,
            recent_users=await self._recent(User),
            recent_inventories=await self._recent(Inventory),
            recent_items=await self._recent(Item),
        )

    async def _count(self, model) -> int:
        return await self.db.scalar(select(func.count()).select_from(model)) or 0

    async def _recent(self, model) -> list:
        result = await self.db.execute(
            select(model).order_by(model.created_at.desc()).limit(RECENT_LIMIT),
        )
        return list(result.scalars().all())
