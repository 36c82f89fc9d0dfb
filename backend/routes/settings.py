"""Health check, option listing and photo-backend connection check."""

import logging

from fastapi import APIRouter

from artspark.taxonomy import TAXONOMY
from backend.config import get_config, photo_client

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
async def health():
    """Health check."""
    return {"status": "ok"}


@router.get("/options")
async def options():
    """List levels, categories, moods, styles and tools the generators accept."""
    return TAXONOMY.describe()


@router.get("/check-connection")
async def check_connection():
    """Quick health check against the configured Unsplash API."""
    client = photo_client(get_config())
    if client is None:
        return {"ok": False, "configured": False}
    try:
        await client.search("art", page=1, per_page=1)
    except Exception as e:
        logger.warning("Unsplash connection check failed: %s", e)
        return {"ok": False, "configured": True}
    return {"ok": True, "configured": True}
