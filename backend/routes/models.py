"""Pydantic request models for API endpoints."""

from pydantic import BaseModel

from artspark.models import FilterSelection


class GenerateContentBody(BaseModel):
    filters: FilterSelection


class ChallengeBody(BaseModel):
    # Validated by the composer so unknown levels get a 400, not a 422
    level: str


class LoadMoreBody(BaseModel):
    keywords: list[str]
