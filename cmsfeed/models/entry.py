"""Entry models for articles and the fetched entry collection."""

from collections.abc import Mapping
from datetime import datetime
from typing import Any, List, Optional

import pendulum
from pydantic import Field, ValidationError, field_validator

from ..errors import GenerationError
from .asset import Asset
from .base import ContentModel, Link, SysInfo
from .rich_text import RichTextDocument


class EntryFields(ContentModel):
    """Article fields."""

    title: Optional[str] = Field(None, description="Article title")
    slug: str = Field(..., description="URL slug of the article")
    publication_date: Optional[datetime] = Field(
        None, alias="publicationDate", description="Publication timestamp"
    )
    content: Optional[RichTextDocument] = Field(None, description="Rich text body")
    cover_visual: Optional[Link] = Field(None, alias="coverVisual", description="Link to the cover asset")
    category_tag: Optional[str] = Field(None, alias="categoryTag", description="Category label")

    @field_validator("publication_date", mode="before")
    @classmethod
    def parse_publication_date(cls, v: Any) -> Any:
        """Accept any ISO 8601 variant the content source emits."""
        if isinstance(v, str):
            return pendulum.parse(v)
        return v

    @field_validator("content", mode="before")
    @classmethod
    def drop_malformed_content(cls, v: Any) -> Any:
        """A body that is not a document tree counts as no body."""
        if not isinstance(v, Mapping):
            return None
        return v

    @field_validator("cover_visual", mode="before")
    @classmethod
    def drop_malformed_cover(cls, v: Any) -> Any:
        """A link without a target ID counts as no cover."""
        if not isinstance(v, Mapping):
            return None
        sys = v.get("sys")
        if not isinstance(sys, Mapping) or not sys.get("id"):
            return None
        return v


class Entry(ContentModel):
    """One article."""

    sys: SysInfo
    fields: EntryFields

    @property
    def id(self) -> str:
        return self.sys.id


class Includes(ContentModel):
    """Linked resources delivered alongside the entries."""

    assets: List[Asset] = Field(default_factory=list, alias="Asset", description="Linked assets")


class EntryCollection(ContentModel):
    """Page of entries returned by the delivery API."""

    items: List[Entry] = Field(default_factory=list, description="Entries in fetch order")
    includes: Includes = Field(default_factory=Includes)
    total: Optional[int] = Field(None, description="Total matching entries upstream")
    skip: Optional[int] = Field(None, description="Offset of this page")
    limit: Optional[int] = Field(None, description="Page size")


def parse_collection(payload: Any) -> EntryCollection:
    """Validate a raw delivery API payload."""
    try:
        return EntryCollection.model_validate(payload)
    except ValidationError as e:
        raise GenerationError(f"Malformed content payload: {e}") from e
