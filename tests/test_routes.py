"""HTTP-level tests for the /api endpoints, driven through httpx.ASGITransport."""

from unittest.mock import AsyncMock, patch

import httpx
import pytest

from artspark import taxonomy
from artspark.composer import SamplingExhausted
from artspark.models import Photo, Prompt
from artspark.photos import PhotoSearchError, SearchResult
from backend.app import create_app


def _photo(photo_id: str) -> Photo:
    return Photo.model_validate({
        "id": photo_id,
        "urls": {"small": "s", "regular": "r"},
        "alt_description": None,
        "user": {"name": "Ansel"},
    })


class FakeSearch:
    def __init__(self, failing=()):
        self.failing = set(failing)
        self.queries: list[str] = []

    async def search(self, query, page, per_page):
        self.queries.append(query)
        if query in self.failing:
            raise PhotoSearchError("boom")
        return SearchResult(photos=[_photo(f"{query}-{page}")], total=50, total_pages=3)


@pytest.fixture
async def api():
    transport = httpx.ASGITransport(app=create_app())
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def fake_search():
    search = FakeSearch()
    with patch("backend.routes.generate.photo_client", return_value=search), \
         patch("backend.routes.gallery.photo_client", return_value=search):
        yield search


# ── settings ─────────────────────────────────────────────────


async def test_health(api):
    resp = await api.get("/api/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


async def test_options(api):
    resp = await api.get("/api/options")
    assert resp.status_code == 200
    assert resp.json()["categories"] == list(taxonomy.all_categories())


async def test_check_connection_unconfigured(api):
    resp = await api.get("/api/check-connection")
    assert resp.json() == {"ok": False, "configured": False}


async def test_check_connection_ok(api, monkeypatch):
    monkeypatch.setenv("UNSPLASH_ACCESS_KEY", "k")
    with patch("artspark.photos.UnsplashClient.search", new_callable=AsyncMock) as mock_search:
        mock_search.return_value = SearchResult()
        resp = await api.get("/api/check-connection")
    assert resp.json() == {"ok": True, "configured": True}


async def test_check_connection_failure(api, monkeypatch):
    monkeypatch.setenv("UNSPLASH_ACCESS_KEY", "k")
    with patch("artspark.photos.UnsplashClient.search", new_callable=AsyncMock) as mock_search:
        mock_search.side_effect = PhotoSearchError("down")
        resp = await api.get("/api/check-connection")
    assert resp.json() == {"ok": False, "configured": True}


async def test_check_connection_malformed_api_url(api, monkeypatch):
    monkeypatch.setenv("UNSPLASH_ACCESS_KEY", "k")
    monkeypatch.setenv("UNSPLASH_API_URL", "https://api.unsplash.com:abc")
    resp = await api.get("/api/check-connection")
    assert resp.status_code == 200
    assert resp.json() == {"ok": False, "configured": True}


# ── generate-content ─────────────────────────────────────────


async def test_generate_content(api, fake_search):
    body = {"filters": {"level": "intermediate", "category": ["nature", "food"],
                        "mood": "soft", "style": "manga"}}
    resp = await api.post("/api/generate-content", json=body)
    assert resp.status_code == 200
    data = resp.json()
    assert data["sentence"].startswith("Imagine a combination of ")
    assert len(data["keywords"]) == 3
    assert data["keywords"][0] in taxonomy.subjects_of("nature")
    assert data["keywords"][1] in taxonomy.subjects_of("food")
    assert data["keywords"][2] == "manga"
    assert len(data["photos"]) == 3
    assert fake_search.queries == data["keywords"]


async def test_generate_content_photo_shape(api, fake_search):
    body = {"filters": {"level": "beginner", "category": ["worlds"]}}
    data = (await api.post("/api/generate-content", json=body)).json()
    photo = data["photos"][0]
    assert set(photo) >= {"id", "urls", "alt_description", "user"}
    assert photo["urls"]["small"] == "s"
    assert photo["user"]["name"] == "Ansel"


async def test_generate_content_without_backend(api):
    body = {"filters": {"level": "beginner", "category": ["nature"], "mood": "random"}}
    resp = await api.post("/api/generate-content", json=body)
    assert resp.status_code == 200
    data = resp.json()
    assert data["photos"] == []
    assert len(data["keywords"]) == 1


async def test_generate_content_partial_failure(api):
    search = FakeSearch(failing={"pizza"})
    body = {"filters": {"level": "advanced", "category": ["nature", "food", "worlds"]}}
    with patch("backend.routes.generate.photo_client", return_value=search), \
         patch("backend.routes.generate.compose_idea") as mock_compose:
        mock_compose.return_value = Prompt(
            sentence="Imagine a combination of eerie fox and pizza and galaxy",
            keywords=["fox", "pizza", "galaxy"],
        )
        resp = await api.post("/api/generate-content", json=body)
    assert resp.status_code == 200
    ids = [p["id"].split("-")[0] for p in resp.json()["photos"]]
    assert ids == ["fox", "galaxy"]


async def test_generate_content_four_categories_rejected(api):
    body = {"filters": {"level": "advanced",
                        "category": ["nature", "food", "worlds", "abstract"]}}
    with patch("backend.routes.generate.compose_idea") as mock_compose:
        resp = await api.post("/api/generate-content", json=body)
    assert resp.status_code == 422
    mock_compose.assert_not_called()


async def test_generate_content_over_level_cap_rejected(api):
    body = {"filters": {"level": "beginner", "category": ["nature", "food"]}}
    resp = await api.post("/api/generate-content", json=body)
    assert resp.status_code == 422


async def test_generate_content_unknown_mood_rejected(api):
    body = {"filters": {"level": "beginner", "category": ["nature"], "mood": "cheerful"}}
    resp = await api.post("/api/generate-content", json=body)
    assert resp.status_code == 422


# ── generate-challenge ───────────────────────────────────────


@pytest.mark.parametrize("level, length", [
    ("beginner", 2), ("intermediate", 3), ("advanced", 5),
])
async def test_generate_challenge(api, fake_search, level, length):
    resp = await api.post("/api/generate-challenge", json={"level": level})
    assert resp.status_code == 200
    data = resp.json()
    assert data["sentence"].startswith("Create a painting ")
    assert len(data["keywords"]) == length
    assert len(data["photos"]) == length


async def test_generate_challenge_invalid_level(api):
    resp = await api.post("/api/generate-challenge", json={"level": "expert"})
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Valid skill level is required"


async def test_generate_challenge_sampling_exhausted(api):
    with patch("backend.routes.generate.compose_challenge",
               side_effect=SamplingExhausted("too few categories")):
        resp = await api.post("/api/generate-challenge", json={"level": "advanced"})
    assert resp.status_code == 500


# ── load-more-photos ─────────────────────────────────────────


async def test_load_more_reuses_keywords(api, fake_search):
    with patch("backend.routes.generate.compose_idea") as mock_idea, \
         patch("backend.routes.generate.compose_challenge") as mock_challenge:
        resp = await api.post("/api/load-more-photos", json={"keywords": ["owl", "ink"]})
    assert resp.status_code == 200
    assert len(resp.json()["photos"]) == 2
    assert fake_search.queries == ["owl", "ink"]
    mock_idea.assert_not_called()
    mock_challenge.assert_not_called()


async def test_load_more_grows_collection(api, fake_search):
    body = {"filters": {"level": "intermediate", "category": ["nature", "abstract"]}}
    first = (await api.post("/api/generate-content", json=body)).json()
    more = (await api.post("/api/load-more-photos", json={"keywords": first["keywords"]})).json()
    assert len(first["photos"] + more["photos"]) >= len(first["photos"])


async def test_load_more_requires_list(api):
    resp = await api.post("/api/load-more-photos", json={"keywords": "owl"})
    assert resp.status_code == 422


# ── gallery ──────────────────────────────────────────────────


async def test_gallery_search(api, fake_search):
    resp = await api.get("/api/gallery/search", params={"query": "lighthouse", "page": 2})
    assert resp.status_code == 200
    data = resp.json()
    assert data["total"] == 50
    assert data["totalPages"] == 3
    assert data["query"] == "lighthouse"
    assert data["photos"][0]["id"] == "lighthouse-2"


async def test_gallery_requires_query(api, fake_search):
    resp = await api.get("/api/gallery/search")
    assert resp.status_code == 422


async def test_gallery_rejects_page_zero(api, fake_search):
    resp = await api.get("/api/gallery/search", params={"query": "x", "page": 0})
    assert resp.status_code == 422


async def test_gallery_unconfigured(api):
    resp = await api.get("/api/gallery/search", params={"query": "lighthouse"})
    assert resp.status_code == 500
    assert resp.json()["detail"] == "Unsplash API key not configured"


async def test_gallery_backend_failure(api):
    search = FakeSearch(failing={"lighthouse"})
    with patch("backend.routes.gallery.photo_client", return_value=search):
        resp = await api.get("/api/gallery/search", params={"query": "lighthouse"})
    assert resp.status_code == 502


async def test_gallery_malformed_api_url(api, monkeypatch):
    monkeypatch.setenv("UNSPLASH_ACCESS_KEY", "k")
    monkeypatch.setenv("UNSPLASH_API_URL", "https://api.unsplash.com:abc")
    resp = await api.get("/api/gallery/search", params={"query": "lighthouse"})
    assert resp.status_code == 502


async def test_generate_content_malformed_api_url_keeps_sentence(api, monkeypatch):
    monkeypatch.setenv("UNSPLASH_ACCESS_KEY", "k")
    monkeypatch.setenv("UNSPLASH_API_URL", "https://api.unsplash.com:abc")
    body = {"filters": {"level": "beginner", "category": ["nature"]}}
    resp = await api.post("/api/generate-content", json=body)
    assert resp.status_code == 200
    data = resp.json()
    assert data["sentence"].startswith("Imagine a combination of ")
    assert data["photos"] == []
