"""Write Helpers — commit with stale-write resolution shared by all services.

Invariants:
    - A stale write (version mismatch or vanished row) always rolls back first
    - Vanished row => ResourceNotFoundError; row still present => ConcurrencyError
    - Conflicts are never retried or merged
"""

import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.exc import StaleDataError

from app.core.errors import ConcurrencyError, ResourceNotFoundError

logger = logging.getLogger(__name__)


async def row_exists(db: AsyncSession, model, resource_id: object) -> bool:
    count = await db.scalar(
        select(func.count()).select_from(model).where(model.id == resource_id),
    )
    return bool(count)


async def commit_or_resolve_conflict(
    db: AsyncSession, model, resource_type: str, resource_id: object,
) -> None:
    """Commit pending changes; classify a stale write as not-found or conflict."""
    try:
        await db.commit()
    except StaleDataError:
        await db.rollback()
        if not await row_exists(db, model, resource_id):
            logger.warning(
                f"{resource_type} {resource_id} vanished during write",
            )
            raise ResourceNotFoundError(resource_type, resource_id)
        logger.error(f"{resource_type} {resource_id} modified concurrently")
        raise ConcurrencyError(
            f"{resource_type} '{resource_id}' was modified by another request",
        )
