"""FastAPI API endpoints under /api.

Endpoint groups: settings (health, options, check-connection), generation
(generate-content, generate-challenge, load-more-photos) and gallery search.
"""

from fastapi import APIRouter

from .gallery import router as gallery_router
from .generate import router as generate_router
from .settings import router as settings_router

router = APIRouter()
router.include_router(settings_router)
router.include_router(generate_router)
router.include_router(gallery_router)
