"""Inventory ORM — a named collection of items with an optional owner.

Invariants:
    - name is non-nullable, at most 100 chars; description at most 500
    - created_by is nullable (Unowned); SET NULL when the creator is deleted
    - created_at set once on insert, never written by update paths
    - version increments on every UPDATE (optimistic concurrency)

Design Decisions:
    - Integer primary key: inventories are addressed by short numeric ids in URLs
    - items cascade="all, delete-orphan" + ON DELETE CASCADE: deleting an
      inventory removes its items in the same flush
    - Totals are derived properties over the loaded items, never stored
"""

import uuid
from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from app.core import stock_levels
from app.core.domain_types import Owner, owner_of
from app.db.base import Base


class Inventory(Base):
    """Inventory aggregate root — owns its Items."""
    __tablename__ = "inventories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(String(500), nullable=True)
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

    items: Mapped[list["Item"]] = relationship(
        "Item", back_populates="inventory",
        cascade="all, delete-orphan", lazy="selectin",
        order_by="Item.id",
    )

    __mapper_args__ = {"version_id_col": version}

    @property
    def owner(self) -> Owner:
        return owner_of(self.created_by)

    @property
    def total_items(self) -> int:
        return len(self.items)

    @property
    def total_quantity(self) -> int:
        return stock_levels.total_quantity(self.items)

    @property
    def total_value(self) -> Decimal:
        return stock_levels.total_value(self.items)
