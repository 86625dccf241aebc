"""Base model classes shared by all content models."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ContentModel(BaseModel):
    """Base model for everything read from the content source."""

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        frozen=True,
    )


class SysInfo(ContentModel):
    """System metadata attached to every entry, asset and link."""

    id: str = Field(..., description="ID assigned by the content source")
    type: Optional[str] = Field(None, description="Entry, Asset or Link")
    link_type: Optional[str] = Field(None, alias="linkType", description="Target type of a link")
    created_at: Optional[datetime] = Field(None, alias="createdAt", description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt", description="Last update timestamp")


class Link(ContentModel):
    """Reference to another entry or asset by ID."""

    sys: SysInfo

    @property
    def id(self) -> str:
        return self.sys.id
