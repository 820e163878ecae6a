"""
Catalog service.

Serves all read operations on the catalog straight from memory:
browse, lookup by id, multi-criteria search and genre enumeration.
"""

import logging
from typing import List, Optional, Tuple

from app.core.catalog.loader import MovieSource, load_movies
from app.core.catalog.models import Catalog, Movie
from app.core.reviews.models import Review, ReviewLookup

logger = logging.getLogger(__name__)


def _normalize(query: Optional[str]) -> Optional[str]:
    """Trim and lower-case a text query; blank means not provided."""
    if query is None:
        return None
    query = query.strip()
    return query.lower() if query else None


def _is_valid_id(movie_id) -> bool:
    return (
        isinstance(movie_id, int)
        and not isinstance(movie_id, bool)
        and movie_id > 0
    )


class CatalogService:
    """
    Read-only access to a loaded Catalog.

    The catalog is never mutated after construction, so instances are safe
    to share between concurrent requests without locking.
    """

    def __init__(
        self,
        catalog: Catalog,
        review_lookup: Optional[ReviewLookup] = None
    ):
        """
        Initialize catalog service.

        Args:
            catalog: Loaded catalog snapshot
            review_lookup: Optional callable mapping a movie id to its reviews
        """
        self._catalog = catalog
        self._review_lookup = review_lookup

    @classmethod
    def from_source(
        cls,
        source: MovieSource,
        review_lookup: Optional[ReviewLookup] = None
    ) -> 'CatalogService':
        """Load movies from source and build a service around them."""
        return cls(Catalog.from_movies(load_movies(source)), review_lookup)

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    def get_all(self) -> Tuple[Movie, ...]:
        """Get all movies in catalog order."""
        return self._catalog.movies

    def get_by_id(self, movie_id: Optional[int]) -> Optional[Movie]:
        """
        Get movie by ID.

        Args:
            movie_id: Movie ID; None or non-positive values never match

        Returns:
            Movie if found, None otherwise
        """
        if not _is_valid_id(movie_id):
            return None
        return self._catalog.by_id.get(movie_id)

    def search(
        self,
        name: Optional[str] = None,
        movie_id: Optional[int] = None,
        genre: Optional[str] = None
    ) -> List[Movie]:
        """
        Search movies matching all supplied criteria.

        Name and genre are case-insensitive substring matches after trimming;
        blank values are ignored. A supplied id must match exactly. With no
        criteria every movie is returned. Catalog order is preserved.

        Args:
            name: Partial movie name
            movie_id: Exact movie ID
            genre: Partial genre string (e.g. "crime" matches "Action/Crime")

        Returns:
            List of matching movies (possibly empty)
        """
        logger.info(
            f"Searching movies with name: '{name}', id: '{movie_id}', genre: '{genre}'"
        )
        if movie_id is not None and not _is_valid_id(movie_id):
            logger.info("Found 0 movies")
            return []

        name_query = _normalize(name)
        genre_query = _normalize(genre)

        results = [
            movie for movie in self._catalog.movies
            if (movie_id is None or movie.id == movie_id)
            and (name_query is None or name_query in movie.name.lower())
            and (genre_query is None or genre_query in movie.genre.lower())
        ]

        logger.info(f"Found {len(results)} movies")
        return results

    def get_all_genres(self) -> List[str]:
        """Get distinct genre strings, sorted ascending."""
        return sorted({movie.genre for movie in self._catalog.movies})

    def reviews_for(self, movie_id: int) -> List[Review]:
        """Get reviews for a movie from the injected lookup (empty if none)."""
        if self._review_lookup is None:
            return []
        return list(self._review_lookup(movie_id))
