"""Configuration models."""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from ..errors import ConfigurationError


class ChannelConfig(BaseModel):
    """RSS channel metadata."""

    title: str = Field("Eccasphere", description="Channel title")
    description: str = Field("The world of ECCASIN.", description="Channel description")
    language: str = Field("en-us", description="Channel language code")
    self_link: str = Field(
        "https://eccasin.com/rss.xml",
        description="Public URL of the feed itself (atom:link rel=self)",
    )
    placeholder_description: str = Field(
        "Read more at Eccasphere.",
        description="Item description used when an entry has neither excerpt nor title",
    )


class ServerConfig(BaseModel):
    """HTTP server configuration."""

    host: str = Field("0.0.0.0", description="Bind address")
    port: int = Field(8000, description="Bind port", ge=1, le=65535)


class FeedConfig(BaseModel):
    """Main configuration model."""

    space_id: Optional[str] = Field(None, description="Contentful space ID")
    access_token: Optional[str] = Field(None, description="Contentful delivery API token")
    content_type: str = Field("article", description="Content type ID of articles")
    environment: str = Field("master", description="Contentful environment")
    cdn_base_url: str = Field("https://cdn.contentful.com", description="Delivery API base URL")
    site_url: str = Field(
        "https://www.eccasin.com/eccasphere",
        description="Public base URL that article slugs are appended to",
    )
    feed_limit: int = Field(20, description="Max entries in the RSS feed", ge=1, le=1000)
    timeout: float = Field(30.0, description="Upstream request timeout in seconds", gt=0)
    cache_control: str = Field(
        "s-maxage=300, stale-while-revalidate",
        description="Cache-Control header sent with the JSON listing",
    )
    log_level: str = Field("INFO", description="Logging level")
    channel: ChannelConfig = Field(default_factory=ChannelConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)

    @field_validator("site_url", "cdn_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize base URLs so paths can be appended with a single slash."""
        return v.rstrip("/")

    @field_validator("space_id", "access_token")
    @classmethod
    def blank_to_none(cls, v: Optional[str]) -> Optional[str]:
        """Treat empty secrets as unset."""
        if v is not None and not v.strip():
            return None
        return v

    def missing_credentials(self) -> List[str]:
        """Names of required secrets that are not set."""
        missing = []
        if not self.space_id:
            missing.append("CONTENTFUL_SPACE_ID")
        if not self.access_token:
            missing.append("CONTENTFUL_ACCESS_TOKEN")
        return missing

    def require_credentials(self) -> None:
        """Raise ConfigurationError unless both Contentful secrets are set."""
        missing = self.missing_credentials()
        if missing:
            raise ConfigurationError(missing)
