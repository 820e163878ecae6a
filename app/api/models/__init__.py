"""
Pydantic schemas for API responses.
"""

from app.api.models.movie import MovieResponse, MovieDetails, MovieBrowse
from app.api.models.review import ReviewResponse
from app.api.models.search import SearchResponse

__all__ = [
    "MovieResponse",
    "MovieDetails",
    "MovieBrowse",
    "ReviewResponse",
    "SearchResponse",
]
