"""Site Content Service — key/value page copy with key fallback.

Invariants:
    - Reading a missing key returns the key itself as the value
    - Only admins write; last_updated/updated_by stamped on every write
"""

import logging
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import Actor
from app.models.site_content import SiteContent
from app.schemas.site_content import SiteContentResponse, SiteContentWrite
from app.services.admin_service import require_admin

logger = logging.getLogger(__name__)


class SiteContentService:

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _find(self, key: str) -> SiteContent | None:
        result = await self.db.execute(select(SiteContent).where(SiteContent.key == key))
        return result.scalar_one_or_none()

    async def get_content(self, key: str) -> SiteContentResponse:
        content = await self._find(key)
        if content is None:
            return SiteContentResponse(key=key, value=key)
        return SiteContentResponse(
            key=content.key,
            value=content.value,
            description=content.description,
            last_updated=content.last_updated,
            updated_by=content.updated_by,
        )

    async def set_content(
        self, key: str, data: SiteContentWrite, actor: Actor,
    ) -> SiteContentResponse:
        require_admin(actor)
        content = await self._find(key)
        if content is None:
            content = SiteContent(key=key, value=data.value)
            self.db.add(content)
        content.value = data.value
        content.description = data.description
        content.last_updated = datetime.now(timezone.utc)
        content.updated_by = str(actor.user_id)
        await self.db.commit()
        logger.info(f"Site content '{key}' updated", extra={"user_id": actor.user_id})
        return await self.get_content(key)
