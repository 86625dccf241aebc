"""Error types raised while fetching content and building feeds."""

from typing import Iterable, Optional


class CmsFeedError(Exception):
    """Base class for all cmsfeed errors."""


class ConfigurationError(CmsFeedError):
    """A required setting is missing."""

    def __init__(self, missing: Iterable[str]) -> None:
        self.missing = list(missing)
        super().__init__(f"Missing required configuration: {', '.join(self.missing)}")


class FetchError(CmsFeedError):
    """The content source could not be reached or answered with a non-success status."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
    ) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(message)


class GenerationError(CmsFeedError):
    """Fetched content could not be turned into a feed."""
