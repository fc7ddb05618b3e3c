"""Inventory Schemas — request validation and response shapes.

Invariants:
    - InventoryWrite.name: 1-100 chars, stripped, non-empty
    - InventoryWrite.description: at most 500 chars, blank becomes None
    - No owner/created_at fields on input: edits cannot reassign ownership

Design Decisions:
    - One write schema for create and edit: both accept the same editable fields
    - InventorySummary omits items (list view); InventoryDetail includes them
"""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.schemas._text import strip_optional, strip_required
from app.schemas.item import ItemResponse


class InventoryWrite(BaseModel):
    """Create/edit payload for an inventory."""
    name: str = Field(min_length=1, max_length=100)
    description: str | None = Field(None, max_length=500)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        return strip_required(v, "name")

    @field_validator("description")
    @classmethod
    def strip_description(cls, v: str | None) -> str | None:
        return strip_optional(v)


class InventorySummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str | None = None
    created_by: UUID | None = None
    created_at: datetime
    total_items: int
    total_quantity: int
    total_value: Decimal


class InventoryDetail(InventorySummary):
    items: list[ItemResponse] = []


class InventoryMutationResponse(BaseModel):
    message: str
    inventory: InventoryDetail


class DeletionResponse(BaseModel):
    message: str
    deleted: bool = True
