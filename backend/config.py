"""App configuration from environment variables (and .env via python-dotenv).

get_config() returns defaults merged with whatever the environment sets.
Nothing is persisted; every call re-reads the environment.
"""

import logging
import math
import os
from typing import Any

from artspark.photos import DEFAULT_API_URL, UnsplashClient

logger = logging.getLogger(__name__)

_CONFIG_DEFAULTS: dict[str, Any] = {
    "unsplash_access_key": "",
    "unsplash_api_url": DEFAULT_API_URL,
    "photos_per_keyword": 6,
    "max_random_page": 5,
    "gallery_per_page": 24,
    "search_timeout": 10.0,
}

# config key → environment variable (first one set wins)
_ENV_VARS: dict[str, tuple[str, ...]] = {
    "unsplash_access_key": ("UNSPLASH_ACCESS_KEY", "UNSPLASH_API_KEY"),
    "unsplash_api_url": ("UNSPLASH_API_URL",),
    "photos_per_keyword": ("PHOTOS_PER_KEYWORD",),
    "max_random_page": ("MAX_RANDOM_PAGE",),
    "gallery_per_page": ("GALLERY_PER_PAGE",),
    "search_timeout": ("SEARCH_TIMEOUT",),
}

# Unsplash caps per_page at 30
MAX_PER_PAGE = 30
_PER_PAGE_KEYS = ("photos_per_keyword", "gallery_per_page")


def _env(names: tuple[str, ...]) -> str | None:
    for name in names:
        value = os.getenv(name)
        if value:
            return value
    return None


def get_config() -> dict[str, Any]:
    """Read config, returning defaults merged with environment values."""
    config = dict(_CONFIG_DEFAULTS)
    for key, names in _ENV_VARS.items():
        raw = _env(names)
        if raw is None:
            continue
        default = _CONFIG_DEFAULTS[key]
        if isinstance(default, str):
            config[key] = raw.strip()
            continue
        try:
            value = type(default)(raw)
        except ValueError:
            logger.warning("Ignoring invalid %s=%r, using %r", names[0], raw, default)
            continue
        if not math.isfinite(value) or value <= 0:
            logger.warning("Ignoring non-positive or non-finite %s=%r, using %r",
                           names[0], raw, default)
            continue
        if key in _PER_PAGE_KEYS and value > MAX_PER_PAGE:
            logger.warning("Clamping %s=%r to %d", names[0], raw, MAX_PER_PAGE)
            value = MAX_PER_PAGE
        config[key] = value
    return config


def photo_client(config: dict[str, Any]) -> UnsplashClient | None:
    """Build the Unsplash client, or None when no access key is set."""
    if not config["unsplash_access_key"]:
        return None
    return UnsplashClient(
        access_key=config["unsplash_access_key"],
        api_url=config["unsplash_api_url"],
        timeout=config["search_timeout"],
    )
