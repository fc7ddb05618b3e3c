"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Inventory is the aggregate root for Items; deleting it deletes its Items

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from app.models.user import User  # noqa: F401
from app.models.user_role import UserRole  # noqa: F401
from app.models.inventory import Inventory  # noqa: F401
from app.models.item import Item  # noqa: F401
from app.models.site_content import SiteContent  # noqa: F401
