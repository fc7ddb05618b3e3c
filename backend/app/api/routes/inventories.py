"""Inventory Routes — list/search, details, create, edit, delete.

Invariants:
    - GET endpoints are public; mutations require a bearer token
    - Mutation responses carry a user-facing notice in "message"
"""

import logging

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependencies import get_actor
from app.core.domain_types import Actor
from app.infrastructure.database import get_db
from app.schemas.inventory import (
    DeletionResponse, InventoryDetail, InventoryMutationResponse,
    InventorySummary, InventoryWrite,
)
from app.services.inventory_service import InventoryService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/inventories", tags=["inventories"])


@router.get("", response_model=list[InventorySummary])
async def list_inventories(
    search: str | None = Query(None, max_length=200),
    db: AsyncSession = Depends(get_db),
):
    """List inventories, optionally searching name and description."""
    inventories = await InventoryService(db).list_inventories(search)
    return [InventorySummary.model_validate(i) for i in inventories]


@router.get("/{inventory_id}", response_model=InventoryDetail)
async def get_inventory(inventory_id: int, db: AsyncSession = Depends(get_db)):
    inventory = await InventoryService(db).get_inventory(inventory_id)
    return InventoryDetail.model_validate(inventory)


@router.post(
    "", response_model=InventoryMutationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_inventory(
    body: InventoryWrite,
    actor: Actor = Depends(get_actor),
    db: AsyncSession = Depends(get_db),
):
    inventory = await InventoryService(db).create_inventory(body, actor)
    return InventoryMutationResponse(
        message=f"Inventory '{inventory.name}' created successfully.",
        inventory=InventoryDetail.model_validate(inventory),
    )


@router.put("/{inventory_id}", response_model=InventoryMutationResponse)
async def update_inventory(
    inventory_id: int,
    body: InventoryWrite,
    actor: Actor = Depends(get_actor),
    db: AsyncSession = Depends(get_db),
):
    inventory = await InventoryService(db).update_inventory(inventory_id, body, actor)
    return InventoryMutationResponse(
        message=f"Inventory '{inventory.name}' updated successfully.",
        inventory=InventoryDetail.model_validate(inventory),
    )


@router.delete("/{inventory_id}", response_model=DeletionResponse)
async def delete_inventory(
    inventory_id: int,
    actor: Actor = Depends(get_actor),
    db: AsyncSession = Depends(get_db),
):
    """Delete an inventory and every item in it."""
    name = await InventoryService(db).delete_inventory(inventory_id, actor)
    return DeletionResponse(
        message=f"Inventory '{name}' and all its items deleted successfully.",
    )
