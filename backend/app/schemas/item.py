"""Item Schemas — request validation and response shapes.

Invariants:
    - ItemWrite.name: 1-100 chars, stripped, non-empty
    - quantity >= 0 (int); price >= 0 with at most 2 decimal places
    - category/sku at most 50 chars; blank becomes None
    - display_code is server-assigned and never accepted from input
"""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.schemas._text import strip_optional, strip_required


class ItemWrite(BaseModel):
    """Create/edit payload for an item."""
    name: str = Field(min_length=1, max_length=100)
    description: str | None = Field(None, max_length=500)
    quantity: int = Field(0, ge=0)
    price: Decimal = Field(Decimal("0"), ge=0, max_digits=10, decimal_places=2)
    category: str | None = Field(None, max_length=50)
    sku: str | None = Field(None, max_length=50)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        return strip_required(v, "name")

    @field_validator("description", "category", "sku")
    @classmethod
    def strip_optional_text(cls, v: str | None) -> str | None:
        return strip_optional(v)


class ItemResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    inventory_id: int
    inventory_name: str | None = None
    display_code: str
    name: str
    description: str | None = None
    quantity: int
    price: Decimal
    category: str | None = None
    sku: str | None = None
    created_by: UUID | None = None
    created_at: datetime
    total_value: Decimal
    is_low_stock: bool
    is_out_of_stock: bool


class ItemListResponse(BaseModel):
    """A page of items plus the total number of matches before paging."""
    items: list[ItemResponse]
    total: int
    limit: int
    offset: int
    inventory_id: int | None = None


class ItemMutationResponse(BaseModel):
    message: str
    item: ItemResponse
