"""
Pydantic schemas for the search endpoint envelope.
"""

from typing import Any

from pydantic import BaseModel, Field

from app.api.models.movie import MovieResponse


class SearchResponse(BaseModel):
    """Search result envelope, also used for 400/500 bodies."""

    success: bool
    message: str
    movies: list[MovieResponse] = Field(default_factory=list)
    total_results: int | None = None
    search_criteria: dict[str, Any] | None = None
