"""Core domain models.

Requests, composer output and photo records all pass through these types.
Pydantic is used for validation and serialisation at every data boundary.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from artspark.taxonomy import MAX_CATEGORIES

Level = Literal["beginner", "intermediate", "advanced"]

Category = Literal[
    "nature",
    "fantasy",
    "objects",
    "food",
    "worlds",
    "architecture",
    "character",
    "abstract",
]

Mood = Literal["soft", "dark", "wild", "epic"]

Style = Literal[
    "manga",
    "3d",
    "2d",
    "ink-wash",
    "cartoon",
    "chibi",
    "realism",
    "photorealistic",
    "surrealism",
    "abstract",
    "contemporary",
    "minimalist",
    "impressionist",
    "expressionist",
    "cubist",
    "pop-art",
    "line-drawing",
    "caricature",
    "minimalism",
    "sketch",
]


class FilterSelection(BaseModel):
    """Caller's filters for idea-mode generation."""

    level: Level
    category: list[Category] = Field(min_length=1, max_length=3)
    mood: Mood | Literal["random"] = "random"
    style: Style | None = None

    @field_validator("category")
    @classmethod
    def _distinct(cls, value: list[str]) -> list[str]:
        if len(set(value)) != len(value):
            raise ValueError("categories must be distinct")
        return value

    @model_validator(mode="after")
    def _within_level_cap(self) -> FilterSelection:
        cap = MAX_CATEGORIES[self.level]
        if len(self.category) > cap:
            raise ValueError(
                f"level {self.level!r} allows at most {cap} "
                f"categor{'y' if cap == 1 else 'ies'}, got {len(self.category)}"
            )
        return self


class PhotoUrls(BaseModel):
    model_config = ConfigDict(extra="allow")

    small: str
    regular: str
    full: str | None = None


class PhotoUser(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str
    username: str | None = None


class Photo(BaseModel):
    """A photo record as returned by the Unsplash search API.

    Extra Unsplash fields are kept so the record passes through untouched.
    """

    model_config = ConfigDict(extra="allow")

    id: str
    urls: PhotoUrls
    alt_description: str | None = None
    description: str | None = None
    user: PhotoUser

    @property
    def thumbnail_url(self) -> str:
        return self.urls.small

    @property
    def regular_url(self) -> str:
        return self.urls.regular

    @property
    def author_name(self) -> str:
        return self.user.name


class Prompt(BaseModel):
    """Composer output: the sentence and the keywords that drive photo search."""

    sentence: str
    keywords: list[str]


class GeneratedContent(BaseModel):
    sentence: str
    keywords: list[str]
    photos: list[Photo] = Field(default_factory=list)


class GalleryPage(BaseModel):
    """One page of a free-text gallery search."""

    model_config = ConfigDict(populate_by_name=True)

    photos: list[Photo] = Field(default_factory=list)
    total: int = 0
    total_pages: int = Field(0, alias="totalPages")
    query: str = ""
