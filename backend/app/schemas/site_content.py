"""Site Content Schemas — editable page copy."""

from datetime import datetime

from pydantic import BaseModel, Field


class SiteContentWrite(BaseModel):
    value: str = Field(min_length=1, max_length=1000)
    description: str | None = Field(None, max_length=200)


class SiteContentResponse(BaseModel):
    key: str
    value: str
    description: str | None = None
    last_updated: datetime | None = None
    updated_by: str | None = None
