"""Photo retrieval: HTTP connection to the Unsplash search API.

Generation code talks to any object matching the protocol:

    async def search(self, query: str, page: int, per_page: int) -> SearchResult: ...

Two layers:

    UnsplashClient  One search request against api.unsplash.com.
                    Raises PhotoSearchError on connection, HTTP and
                    protocol failures.
    fetch_photos()  Fan-out over a keyword list. One search per keyword on
                    a random page, run concurrently, merged in keyword
                    order. Never raises for backend faults: a failed or
                    timed-out keyword contributes no photos, and an
                    unconfigured backend yields an empty list.

search_gallery() is the plain pass-through used by gallery mode; its errors
reach the caller.
"""

from __future__ import annotations

import asyncio
import logging
import random
from dataclasses import dataclass, field
from typing import Protocol

import httpx
from pydantic import ValidationError

from artspark.models import GalleryPage, Photo

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.unsplash.com"


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class PhotoSearchError(RuntimeError):
    """Raised when the photo backend cannot be reached or returns an error."""


class RetrievalUnavailable(PhotoSearchError):
    """Raised when no photo backend is configured."""


# ---------------------------------------------------------------------------
# Protocol
# ---------------------------------------------------------------------------

@dataclass
class SearchResult:
    photos: list[Photo] = field(default_factory=list)
    total: int = 0
    total_pages: int = 0


class PhotoSearch(Protocol):
    async def search(self, query: str, page: int, per_page: int) -> SearchResult: ...


# ---------------------------------------------------------------------------
# UnsplashClient
# ---------------------------------------------------------------------------

class UnsplashClient:
    """Async client for GET /search/photos.

    Args:
        access_key: Unsplash access key, sent as "Client-ID <key>".
        api_url:    Base URL of the API. Defaults to https://api.unsplash.com.
        timeout:    HTTP timeout in seconds. Defaults to 10.
    """

    def __init__(
        self,
        access_key: str,
        api_url: str = DEFAULT_API_URL,
        timeout: float = 10.0,
    ) -> None:
        self._access_key = access_key
        self._base_url = api_url.rstrip("/")
        self._timeout = timeout

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Client-ID {self._access_key}",
            "Accept-Version": "v1",
        }

    def _params(self, query: str, page: int, per_page: int) -> dict[str, str | int]:
        return {
            "query": query,
            "page": page,
            "per_page": per_page,
            "orientation": "landscape",
            "order_by": "relevant",
        }

    def _parse_response(self, data: dict) -> SearchResult:
        results = data.get("results") if isinstance(data, dict) else None
        if not isinstance(results, list):
            raise PhotoSearchError("Unexpected response format from Unsplash")

        photos: list[Photo] = []
        for raw in results:
            try:
                photos.append(Photo.model_validate(raw))
            except ValidationError:
                record_id = raw.get("id") if isinstance(raw, dict) else None
                logger.warning("Skipping malformed photo record id=%r", record_id)
        try:
            total = int(data.get("total") or 0)
            total_pages = int(data.get("total_pages") or 0)
        except (TypeError, ValueError) as e:
            raise PhotoSearchError("Unexpected totals in Unsplash response") from e
        return SearchResult(photos=photos, total=total, total_pages=total_pages)

    async def search(self, query: str, page: int = 1, per_page: int = 6) -> SearchResult:
        url = f"{self._base_url}/search/photos"
        logger.debug("unsplash search query=%r page=%d per_page=%d", query, page, per_page)

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                resp = await client.get(
                    url,
                    params=self._params(query, page, per_page),
                    headers=self._headers(),
                )
                resp.raise_for_status()
        except httpx.ConnectError as e:
            raise PhotoSearchError(f"Cannot connect to Unsplash at {self._base_url}") from e
        except httpx.HTTPStatusError as e:
            raise PhotoSearchError(
                f"Unsplash returned HTTP {e.response.status_code}"
            ) from e
        except httpx.TimeoutException as e:
            raise PhotoSearchError(f"Unsplash timed out after {self._timeout}s") from e
        except httpx.InvalidURL as e:
            raise PhotoSearchError(f"Invalid Unsplash API URL {self._base_url}") from e
        except httpx.HTTPError as e:
            raise PhotoSearchError(f"Unsplash request failed: {e}") from e

        try:
            data = resp.json()
        except ValueError as e:
            raise PhotoSearchError("Unsplash returned invalid JSON") from e
        result = self._parse_response(data)
        logger.debug("unsplash response query=%r photos=%d", query, len(result.photos))
        return result


def require_client(client: PhotoSearch | None) -> PhotoSearch:
    """Return client, or raise RetrievalUnavailable when none is configured."""
    if client is None:
        raise RetrievalUnavailable("Unsplash API key not configured")
    return client


# ---------------------------------------------------------------------------
# Fan-out / fan-in
# ---------------------------------------------------------------------------

async def _search_keyword(
    client: PhotoSearch,
    keyword: str,
    page: int,
    per_page: int,
    timeout: float,
) -> list[Photo] | None:
    """Search one keyword; None marks a failed or timed-out search."""
    try:
        result = await asyncio.wait_for(client.search(keyword, page, per_page), timeout)
    except asyncio.TimeoutError:
        logger.warning("Photo search for %r timed out after %ss", keyword, timeout)
        return None
    except PhotoSearchError as e:
        logger.warning("Photo search for %r failed: %s", keyword, e)
        return None
    except Exception:
        logger.exception("Unexpected error searching photos for %r", keyword)
        return None
    return result.photos


async def fetch_photos(
    keywords: list[str],
    client: PhotoSearch | None,
    per_page: int = 6,
    max_page: int = 5,
    timeout: float = 10.0,
    rng: random.Random | None = None,
) -> list[Photo]:
    """Search every keyword concurrently and concatenate results in keyword order.

    Each keyword is searched on a random page in 1..max_page so repeated calls
    ("load more") surface different photos.
    """
    if client is None:
        logger.warning("No Unsplash API key configured, returning no photos")
        return []
    if not keywords:
        return []

    rng = rng or random.Random()
    pages = [rng.randint(1, max(max_page, 1)) for _ in keywords]
    logger.info("Searching photos for keywords %s", keywords)

    results = await asyncio.gather(*(
        _search_keyword(client, keyword, page, per_page, timeout)
        for keyword, page in zip(keywords, pages)
    ))

    failed = [kw for kw, photos in zip(keywords, results) if photos is None]
    if failed and len(failed) == len(keywords):
        logger.warning("Photo retrieval unavailable: all %d searches failed", len(keywords))
    elif failed:
        logger.warning("Partial photo retrieval: %d of %d searches failed %s",
                       len(failed), len(keywords), failed)

    photos = [photo for group in results if group for photo in group]
    logger.info("Fetched %d photos for %d keywords", len(photos), len(keywords))
    return photos


async def search_gallery(
    query: str,
    page: int,
    per_page: int,
    client: PhotoSearch | None,
) -> GalleryPage:
    """Free-text search for gallery mode. Raises PhotoSearchError on failure."""
    result = await require_client(client).search(query, page, per_page)
    logger.info("Gallery search %r page=%d: %d photos", query, page, len(result.photos))
    return GalleryPage(
        photos=result.photos,
        total=result.total,
        total_pages=result.total_pages,
        query=query,
    )
