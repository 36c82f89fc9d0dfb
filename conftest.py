import pytest

UNSPLASH_ENV_VARS = (
    "UNSPLASH_ACCESS_KEY",
    "UNSPLASH_API_KEY",
    "UNSPLASH_API_URL",
    "PHOTOS_PER_KEYWORD",
    "MAX_RANDOM_PAGE",
    "GALLERY_PER_PAGE",
    "SEARCH_TIMEOUT",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Unset photo-backend env before every test so nothing hits the real API."""
    for name in UNSPLASH_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield
