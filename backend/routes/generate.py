"""Idea generation, challenge generation and load-more endpoints.

Composer errors reject the request; photo retrieval never does. A
generation always returns its sentence and keywords, with however many
photos the backend produced (possibly none).
"""

import logging

from fastapi import APIRouter, HTTPException

from artspark.composer import (
    CategoryLimitExceeded,
    InvalidLevel,
    SamplingExhausted,
    compose_challenge,
    compose_idea,
)
from artspark.models import GeneratedContent, Photo, Prompt
from artspark.photos import fetch_photos
from artspark.prompts import PromptError
from backend.config import get_config, photo_client

from .models import ChallengeBody, GenerateContentBody, LoadMoreBody

logger = logging.getLogger(__name__)

router = APIRouter()


async def _fetch(keywords: list[str]) -> list[Photo]:
    config = get_config()
    return await fetch_photos(
        keywords,
        photo_client(config),
        per_page=config["photos_per_keyword"],
        max_page=config["max_random_page"],
        timeout=config["search_timeout"],
    )


async def _with_photos(prompt: Prompt) -> GeneratedContent:
    photos = await _fetch(prompt.keywords)
    logger.info('Generated "%s" with %d photos for keywords %s',
                prompt.sentence, len(photos), prompt.keywords)
    return GeneratedContent(sentence=prompt.sentence, keywords=prompt.keywords, photos=photos)


@router.post("/generate-content")
async def generate_content(body: GenerateContentBody):
    """Generate an idea prompt from the caller's filters, plus reference photos."""
    try:
        prompt = compose_idea(body.filters)
    except CategoryLimitExceeded as e:
        raise HTTPException(400, str(e))
    except (SamplingExhausted, PromptError) as e:
        logger.error("Idea generation failed: %s", e)
        raise HTTPException(500, "Failed to generate content. Please try again.")
    return await _with_photos(prompt)


@router.post("/generate-challenge")
async def generate_challenge(body: ChallengeBody):
    """Generate a randomised challenge for a skill level, plus reference photos."""
    try:
        prompt = compose_challenge(body.level)
    except InvalidLevel:
        raise HTTPException(400, "Valid skill level is required")
    except (SamplingExhausted, PromptError) as e:
        logger.error("Challenge generation failed: %s", e)
        raise HTTPException(500, "Failed to generate challenge. Please try again.")
    return await _with_photos(prompt)


@router.post("/load-more-photos")
async def load_more_photos(body: LoadMoreBody):
    """Fetch another batch of photos for keywords from a previous generation."""
    photos = await _fetch(body.keywords)
    logger.info("Loaded %d more photos for keywords %s", len(photos), body.keywords)
    return {"photos": photos}
