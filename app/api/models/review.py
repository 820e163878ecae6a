"""
Pydantic schemas for Review API.
"""

from pydantic import BaseModel


class ReviewResponse(BaseModel):
    """Response model for a single review."""

    movie_id: int
    user_name: str
    avatar_emoji: str
    rating: float
    comment: str

    class Config:
        from_attributes = True
