"""Item ORM — a stock-keeping record inside exactly one inventory.

Invariants:
    - inventory_id is non-nullable (an Item always belongs to one Inventory)
    - (inventory_id, display_code) is unique
    - quantity >= 0, price >= 0 with 2 fractional digits (Numeric(10, 2))
    - created_at set once on insert; version increments on every UPDATE

Design Decisions:
    - inventory relationship joined-loaded: listings show the parent name
      without an extra round-trip and async code never lazy-loads
    - Derived flags delegate to core.stock_levels (entity threshold <= 5)
"""

import uuid
from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import (
    CheckConstraint, DateTime, ForeignKey, Integer, Numeric, String,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from app.core import stock_levels
from app.core.domain_types import Owner, owner_of
from app.db.base import Base


class Item(Base):
    """Item entity — quantity and price of one product within an inventory."""
    __tablename__ = "items"
    __table_args__ = (
        UniqueConstraint(
            "inventory_id", "display_code", name="uq_items_inventory_display_code",
        ),
        CheckConstraint("quantity >= 0", name="ck_items_quantity_non_negative"),
        CheckConstraint("price >= 0", name="ck_items_price_non_negative"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    inventory_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("inventories.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(String(500), nullable=True)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    price: Mapped[Decimal] = mapped_column(
        Numeric(10, 2), nullable=False, default=Decimal("0.00"),
    )
    display_code: Mapped[str] = mapped_column(String(50), nullable=False)
    category: Mapped[str | None] = mapped_column(String(50), nullable=True)
    sku: Mapped[str | None] = mapped_column(String(50), nullable=True)
    created_by: Mapped[uuid.UUID | None] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    version: Mapped[int] = mapped_column(Integer, nullable=False)

    inventory: Mapped["Inventory"] = relationship(
        "Inventory", back_populates="items", lazy="joined",
    )

    __mapper_args__ = {"version_id_col": version}

    @property
    def owner(self) -> Owner:
        return owner_of(self.created_by)

    @property
    def inventory_name(self) -> str | None:
        return self.inventory.name if self.inventory is not None else None

    @property
    def total_value(self) -> Decimal:
        return stock_levels.line_value(self.quantity, self.price)

    @property
    def is_low_stock(self) -> bool:
        return stock_levels.is_low_stock(self.quantity)

    @property
    def is_out_of_stock(self) -> bool:
        return stock_levels.is_out_of_stock(self.quantity)
