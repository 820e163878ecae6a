"""
JSON-backed review store.

Loads all reviews once and groups them by movie id. Like the catalog
loader, a bad source is logged and leaves the store empty.
"""

import json
import logging
from collections import defaultdict
from pathlib import Path
from typing import Any, Dict, List, Union

from app.core.reviews.models import Review

logger = logging.getLogger(__name__)


_REQUIRED = {
    'movieId': (int,),
    'userName': (str,),
    'rating': (int, float),
    'comment': (str,),
}


def _parse_review(position: int, record: Any) -> Review:
    if not isinstance(record, dict):
        raise ValueError(f"Review {position} is not an object")

    for key, types in _REQUIRED.items():
        value = record.get(key)
        # bool is an int subclass; never accept it as a number
        if isinstance(value, bool) or not isinstance(value, types):
            raise ValueError(f"Review {position} has missing or invalid '{key}': {value!r}")

    avatar = record.get('avatarEmoji', '🙂')
    if not isinstance(avatar, str):
        raise ValueError(f"Review {position} has invalid 'avatarEmoji': {avatar!r}")

    return Review(
        movie_id=record['movieId'],
        user_name=record['userName'],
        avatar_emoji=avatar,
        rating=float(record['rating']),
        comment=record['comment'],
    )


class JsonReviewStore:
    """Callable review lookup over a JSON list of review records."""

    def __init__(self, source: Union[str, Path, List[Dict[str, Any]]]):
        """
        Args:
            source: Path to a JSON file or an already decoded list of records
        """
        self._reviews: Dict[int, List[Review]] = defaultdict(list)
        try:
            records = source
            if isinstance(source, (str, Path)):
                with open(source, 'r', encoding='utf-8') as f:
                    records = json.load(f)
            if not isinstance(records, list):
                raise ValueError("Expected a list of review records")
            for i, record in enumerate(records):
                review = _parse_review(i, record)
                self._reviews[review.movie_id].append(review)
        except (OSError, ValueError, RecursionError) as e:
            # ValueError covers JSONDecodeError and UnicodeDecodeError
            logger.error(f"Failed to load reviews: {e}")
            self._reviews.clear()
            return

        logger.info(
            f"Loaded reviews for {len(self._reviews)} movies"
        )

    def __call__(self, movie_id: int) -> List[Review]:
        return list(self._reviews.get(movie_id, ()))

    def __len__(self) -> int:
        return sum(len(v) for v in self._reviews.values())
