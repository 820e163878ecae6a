"""
Review record and lookup signature.
"""

from dataclasses import dataclass
from typing import Callable, List


@dataclass(frozen=True)
class Review:
    """Single user review of a movie."""

    movie_id: int
    user_name: str
    avatar_emoji: str
    rating: float
    comment: str


# Any callable from movie id to its reviews can back CatalogService.reviews_for
ReviewLookup = Callable[[int], List[Review]]
