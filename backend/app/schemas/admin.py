"""Admin Schemas — dashboard and role-toggle responses."""

from pydantic import BaseModel

from app.schemas.inventory import InventorySummary
from app.schemas.item import ItemResponse
from app.schemas.user import UserResponse


class DashboardResponse(BaseModel):
    total_users: int
    total_inventories: int
    total_items: int
    admin_users: int
    recent_users: list[UserResponse]
    recent_inventories: list[InventorySummary]
    recent_items: list[ItemResponse]


class ToggleAdminResponse(BaseModel):
    message: str
    user: UserResponse
