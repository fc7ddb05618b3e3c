"""Admin Routes — user management, global listings/deletions, dashboard.

Invariants:
    - Every endpoint requires an authenticated admin (403 ADMIN_REQUIRED otherwise)
    - Toggling one's own admin flag answers 400 and changes nothing
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependencies import get_actor
from app.core.domain_types import Actor
from app.infrastructure.database import get_db
from app.schemas.admin import DashboardResponse, ToggleAdminResponse
from app.schemas.inventory import DeletionResponse, InventorySummary
from app.schemas.item import ItemResponse
from app.schemas.user import UserResponse
from app.services.admin_service import AdminService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/admin", tags=["admin"])


@router.get("/dashboard", response_model=DashboardResponse)
async def dashboard(actor: Actor = Depends(get_actor), db: AsyncSession = Depends(get_db)):
    stats = await AdminService(db).dashboard(actor)
    return DashboardResponse(
        total_users=stats.total_users,
        total_inventories=stats.total_inventories,
        total_items=stats.total_items,
        admin_users=stats.admin_users,
        recent_users=[UserResponse.model_validate(u) for u in stats.recent_users],
        recent_inventories=[
            InventorySummary.model_validate(i) for i in stats.recent_inventories
        ],
        recent_items=[ItemResponse.model_validate(i) for i in stats.recent_items],
    )


@router.get("/users", response_model=list[UserResponse])
async def list_users(actor: Actor = Depends(get_actor), db: AsyncSession = Depends(get_db)):
    users = await AdminService(db).list_users(actor)
    return [UserResponse.model_validate(u) for u in users]


@router.post("/users/{user_id}/toggle-admin", response_model=ToggleAdminResponse)
async def toggle_admin(
    user_id: UUID,
    actor: Actor = Depends(get_actor),
    db: AsyncSession = Depends(get_db),
):
    user, message = await AdminService(db).toggle_admin(user_id, actor)
    return ToggleAdminResponse(message=message, user=UserResponse.model_validate(user))


@router.get("/inventories", response_model=list[InventorySummary])
async def list_all_inventories(
    actor: Actor = Depends(get_actor), db: AsyncSession = Depends(get_db),
):
    inventories = await AdminService(db).list_inventories(actor)
    return [InventorySummary.model_validate(i) for i in inventories]


@router.get("/items", response_model=list[ItemResponse])
async def list_all_items(
    actor: Actor = Depends(get_actor), db: AsyncSession = Depends(get_db),
):
    items = await AdminService(db).list_items(actor)
    return [ItemResponse.model_validate(i) for i in items]


@router.delete("/inventories/{inventory_id}", response_model=DeletionResponse)
async def delete_inventory(
    inventory_id: int,
    actor: Actor = Depends(get_actor),
    db: AsyncSession = Depends(get_db),
):
    name = await AdminService(db).delete_inventory(inventory_id, actor)
    return DeletionResponse(
        message=f"Inventory '{name}' and all its items deleted successfully.",
    )


@router.delete("/items/{item_id}", response_model=DeletionResponse)
async def delete_item(
    item_id: int,
    actor: Actor = Depends(get_actor),
    db: AsyncSession = Depends(get_db),
):
    name = await AdminService(db).delete_item(item_id, actor)
    return DeletionResponse(message=f"Item '{name}' deleted successfully.")
