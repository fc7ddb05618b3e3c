"""Item Routes — global and per-inventory listings, create, edit, delete.

Invariants:
    - GET endpoints are public; mutations require a bearer token
    - Unknown stock values apply no filter; unknown sort values sort by name
    - Deleting a missing item answers 404 with "Item not found." in the body
"""

import logging

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependencies import get_actor
from app.core.domain_types import Actor
from app.core.item_listing import ItemFilter, parse_sort_key, parse_stock_filter
from app.infrastructure.database import get_db
from app.schemas.inventory import DeletionResponse
from app.schemas.item import (
    ItemListResponse, ItemMutationResponse, ItemResponse, ItemWrite,
)
from app.services.item_service import DEFAULT_PAGE_SIZE, ItemService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1", tags=["items"])


def item_filter_params(
    search: str | None = Query(None, max_length=200),
    category: str | None = Query(None, max_length=50),
    stock: str | None = Query(None),
    sort: str | None = Query(None),
) -> ItemFilter:
    return ItemFilter(
        search=search,
        category=category or None,
        stock=parse_stock_filter(stock),
        sort=parse_sort_key(sort),
    )


@router.get("/items", response_model=ItemListResponse)
async def list_items(
    item_filter: ItemFilter = Depends(item_filter_params),
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=200),
    offset: int = Query(0, ge=0),
    db: AsyncSession = Depends(get_db),
):
    """Items across all inventories."""
    page = await ItemService(db).list_items(item_filter, limit=limit, offset=offset)
    return ItemListResponse(
        items=[ItemResponse.model_validate(i) for i in page.items],
        total=page.total, limit=limit, offset=offset,
    )


@router.get("/inventories/{inventory_id}/items", response_model=ItemListResponse)
async def list_inventory_items(
    inventory_id: int,
    item_filter: ItemFilter = Depends(item_filter_params),
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=200),
    offset: int = Query(0, ge=0),
    db: AsyncSession = Depends(get_db),
):
    """Items of one inventory."""
    page = await ItemService(db).list_items(
        item_filter, inventory_id=inventory_id, limit=limit, offset=offset,
    )
    return ItemListResponse(
        items=[ItemResponse.model_validate(i) for i in page.items],
        total=page.total, limit=limit, offset=offset,
        inventory_id=inventory_id,
    )


@router.post(
    "/inventories/{inventory_id}/items", response_model=ItemMutationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_item(
    inventory_id: int,
    body: ItemWrite,
    actor: Actor = Depends(get_actor),
    db: AsyncSession = Depends(get_db),
):
    item = await ItemService(db).create_item(inventory_id, body, actor)
    return ItemMutationResponse(
        message=f"Item '{item.name}' added as {item.display_code}.",
        item=ItemResponse.model_validate(item),
    )


@router.get("/items/{item_id}", response_model=ItemResponse)
async def get_item(item_id: int, db: AsyncSession = Depends(get_db)):
    item = await ItemService(db).get_item(item_id)
    return ItemResponse.model_validate(item)


@router.put("/items/{item_id}", response_model=ItemMutationResponse)
async def update_item(
    item_id: int,
    body: ItemWrite,
    actor: Actor = Depends(get_actor),
    db: AsyncSession = Depends(get_db),
):
    item = await ItemService(db).update_item(item_id, body, actor)
    return ItemMutationResponse(
        message=f"Item '{item.name}' updated successfully.",
        item=ItemResponse.model_validate(item),
    )


@router.delete("/items/{item_id}", response_model=DeletionResponse)
async def delete_item(
    item_id: int,
    actor: Actor = Depends(get_actor),
    db: AsyncSession = Depends(get_db),
):
    outcome = await ItemService(db).delete_item(item_id, actor)
    body = DeletionResponse(message=outcome.message, deleted=outcome.deleted)
    if not outcome.deleted:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content=body.model_dump(),
        )
    return body
