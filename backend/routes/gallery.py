"""Gallery free-text photo search."""

import logging

from fastapi import APIRouter, HTTPException, Query

from artspark.photos import PhotoSearchError, RetrievalUnavailable, search_gallery
from backend.config import get_config, photo_client

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/gallery/search")
async def gallery_search(
    query: str = Query(..., min_length=1),
    page: int = Query(1, ge=1),
    per_page: int | None = Query(None, ge=1, le=30),
):
    """Search Unsplash directly. Unlike generation, backend failures are errors here."""
    config = get_config()
    try:
        return await search_gallery(
            query,
            page,
            per_page or config["gallery_per_page"],
            photo_client(config),
        )
    except RetrievalUnavailable as e:
        raise HTTPException(500, str(e))
    except PhotoSearchError as e:
        logger.error("Gallery search %r failed: %s", query, e)
        raise HTTPException(502, "Failed to search photos. Please try again.")
