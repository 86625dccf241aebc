"""Data models for feed generation."""

from typing import List, Optional

from pydantic import BaseModel, Field


class Enclosure(BaseModel):
    """Media file attached to a feed item."""

    url: str = Field(..., description="Absolute file URL")
    type: str = Field(..., description="MIME type")
    length: int = Field(0, description="Size in bytes, 0 when unknown")


class FeedItem(BaseModel):
    """One RSS item."""

    title: str = Field(..., description="Item title")
    link: str = Field(..., description="Canonical article URL")
    pub_date: Optional[str] = Field(None, description="RFC 1123 publication date")
    description: str = Field(..., description="Plain text excerpt")
    enclosure: Optional[Enclosure] = Field(None, description="Cover image")
    category: Optional[str] = Field(None, description="Item category")

    @property
    def guid(self) -> str:
        return self.link


class FeedChannel(BaseModel):
    """RSS channel with its items."""

    title: str = Field(..., description="Channel title")
    link: str = Field(..., description="Site URL")
    description: str = Field(..., description="Channel description")
    language: str = Field(..., description="Channel language")
    last_build_date: str = Field(..., description="RFC 1123 time of generation")
    self_link: str = Field(..., description="Public URL of the feed")
    items: List[FeedItem] = Field(default_factory=list, description="Items in input order")
