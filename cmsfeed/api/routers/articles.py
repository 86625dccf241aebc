"""Article listing endpoint."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ...config import FeedConfig
from ...errors import CmsFeedError, ConfigurationError
from ...pipeline import FeedPipeline
from ..deps import get_config, get_pipeline

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["articles"])

CONFIG_ERROR_MESSAGE = "Server configuration error: Missing Contentful credentials"
FETCH_ERROR_MESSAGE = "Error fetching articles."


@router.get("/articles")
async def list_articles(
    config: Annotated[FeedConfig, Depends(get_config)],
    pipeline: Annotated[FeedPipeline, Depends(get_pipeline)],
):
    """Proxy the published articles as returned by Contentful.

    Failures return a minimal error object; the upstream detail only goes
    to the log.
    """
    try:
        data = await pipeline.articles()
    except ConfigurationError as e:
        logger.error("Missing environment variables: %s", ", ".join(e.missing))
        return JSONResponse(status_code=500, content={"error": CONFIG_ERROR_MESSAGE})
    except CmsFeedError as e:
        logger.error("Error fetching articles: %s", e)
        return JSONResponse(status_code=500, content={"error": FETCH_ERROR_MESSAGE})
    except Exception:
        logger.exception("Unexpected error fetching articles")
        return JSONResponse(status_code=500, content={"error": FETCH_ERROR_MESSAGE})

    return JSONResponse(
        status_code=200,
        content=data,
        headers={"Cache-Control": config.cache_control},
    )
