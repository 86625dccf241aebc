"""RSS feed endpoint."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse, Response

from ...errors import CmsFeedError, ConfigurationError
from ...pipeline import FeedPipeline
from ..deps import get_pipeline
from .articles import CONFIG_ERROR_MESSAGE

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["rss"])

RSS_MEDIA_TYPE = "application/rss+xml; charset=utf-8"
RSS_ERROR_MESSAGE = "Error generating RSS feed."


@router.get("/rss")
async def rss_feed(pipeline: Annotated[FeedPipeline, Depends(get_pipeline)]):
    """Generate an RSS 2.0 feed of the newest articles."""
    try:
        feed = await pipeline.rss()
    except ConfigurationError as e:
        logger.error("Missing environment variables: %s", ", ".join(e.missing))
        return PlainTextResponse(CONFIG_ERROR_MESSAGE, status_code=500)
    except CmsFeedError as e:
        logger.error("Error generating RSS feed: %s", e)
        return PlainTextResponse(RSS_ERROR_MESSAGE, status_code=500)
    except Exception:
        logger.exception("Unexpected error generating RSS feed")
        return PlainTextResponse(RSS_ERROR_MESSAGE, status_code=500)

    return Response(content=feed, status_code=200, media_type=RSS_MEDIA_TYPE)
