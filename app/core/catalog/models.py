"""
Catalog data model.

A Movie is an immutable record; a Catalog is the ordered collection of
movies plus an id index, built once and never mutated afterwards.
"""

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping, Tuple

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Movie:
    """Single movie record."""

    id: int
    name: str
    director: str
    year: int
    genre: str  # may hold several tags, e.g. "Crime/Drama"
    description: str
    duration: int  # minutes
    rating: float


@dataclass(frozen=True)
class Catalog:
    """
    Loaded movie collection with an id index.

    The ordered ``movies`` tuple keeps source order. The ``by_id`` index is
    derived from it; when two movies share an id both stay in ``movies``
    and the later one wins in the index.
    """

    movies: Tuple[Movie, ...] = ()
    by_id: Mapping[int, Movie] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        movies = tuple(self.movies)
        index = {}
        for movie in movies:
            if movie.id in index:
                logger.warning(
                    f"Duplicate movie id {movie.id}: '{movie.name}' replaces "
                    f"'{index[movie.id].name}' in the id index"
                )
            index[movie.id] = movie
        object.__setattr__(self, 'movies', movies)
        object.__setattr__(self, 'by_id', MappingProxyType(index))

    @classmethod
    def empty(cls) -> 'Catalog':
        """Catalog with no movies."""
        return cls(())

    @classmethod
    def from_movies(cls, movies: Iterable[Movie]) -> 'Catalog':
        return cls(tuple(movies))

    def __len__(self) -> int:
        return len(self.movies)
