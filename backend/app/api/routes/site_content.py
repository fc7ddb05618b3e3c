"""Site Content Routes — read page copy (public), update it (admin)."""

from fastapi import APIRouter, Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependencies import get_actor
from app.core.domain_types import Actor
from app.infrastructure.database import get_db
from app.schemas.site_content import SiteContentResponse, SiteContentWrite
from app.services.site_content_service import SiteContentService

router = APIRouter(prefix="/api/v1/site-content", tags=["site-content"])


@router.get("/{key}", response_model=SiteContentResponse)
async def get_content(
    key: str = Path(min_length=1, max_length=100),
    db: AsyncSession = Depends(get_db),
):
    return await SiteContentService(db).get_content(key)


@router.put("/{key}", response_model=SiteContentResponse)
async def set_content(
    body: SiteContentWrite,
    key: str = Path(min_length=1, max_length=100),
    actor: Actor = Depends(get_actor),
    db: AsyncSession = Depends(get_db),
):
    return await SiteContentService(db).set_content(key, body, actor)
