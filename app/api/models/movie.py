"""
Pydantic schemas for Movie API.
"""

from pydantic import BaseModel

from app.api.models.review import ReviewResponse


class MovieResponse(BaseModel):
    """Response model for a single movie."""

    id: int
    name: str
    director: str
    year: int
    genre: str
    description: str
    duration: int
    rating: float

    class Config:
        from_attributes = True


class MovieBrowse(BaseModel):
    """Browse listing: matching movies (or all, on no match) plus filter data."""

    movies: list[MovieResponse]
    total: int
    search_message: str
    genres: list[str]
    search_name: str
    search_id: str
    search_genre: str


class MovieDetails(BaseModel):
    """Movie with display icon and its reviews."""

    movie: MovieResponse
    icon: str
    reviews: list[ReviewResponse]
