"""Asset models for binary resources linked from entries."""

from typing import Optional

from pydantic import Field

from .base import ContentModel, SysInfo

DEFAULT_CONTENT_TYPE = "image/jpeg"


class FileDetails(ContentModel):
    """File details reported by the content source."""

    size: Optional[int] = Field(None, description="File size in bytes")


class AssetFile(ContentModel):
    """File descriptor of an asset."""

    url: Optional[str] = Field(None, description="File URL, usually protocol-relative")
    content_type: Optional[str] = Field(None, alias="contentType", description="MIME type")
    file_name: Optional[str] = Field(None, alias="fileName", description="Original file name")
    details: Optional[FileDetails] = Field(None, description="Size and dimensions")

    @property
    def absolute_url(self) -> str:
        """File URL with an explicit scheme, empty when the file has no URL."""
        if not self.url:
            return ""
        if self.url.startswith("//"):
            return f"https:{self.url}"
        return self.url

    @property
    def mime_type(self) -> str:
        return self.content_type or DEFAULT_CONTENT_TYPE

    @property
    def size(self) -> int:
        if self.details and self.details.size:
            return self.details.size
        return 0


class AssetFields(ContentModel):
    """Asset fields."""

    title: Optional[str] = Field(None, description="Asset title")
    description: Optional[str] = Field(None, description="Asset description")
    file: Optional[AssetFile] = Field(None, description="File descriptor")


class Asset(ContentModel):
    """Binary resource, typically an image."""

    sys: SysInfo
    fields: AssetFields = Field(default_factory=AssetFields)

    @property
    def id(self) -> str:
        return self.sys.id
