"""
Catalog loader.

Parses a JSON list of movie records into Movie values. Loading never
takes the process down: an unreadable or malformed source is logged and
results in an empty catalog.
"""

import json
import logging
from pathlib import Path
from typing import Any, IO, Mapping, Sequence, Tuple, Union

from app.core.catalog.models import Movie

logger = logging.getLogger(__name__)

MovieSource = Union[str, Path, IO[str], Sequence[Mapping[str, Any]]]

# Movie field -> (source key, accepted types)
_FIELDS = {
    'id': ('id', (int,)),
    'name': ('movieName', (str,)),
    'director': ('director', (str,)),
    'year': ('year', (int,)),
    'genre': ('genre', (str,)),
    'description': ('description', (str,)),
    'duration': ('duration', (int,)),
    'rating': ('imdbRating', (int, float)),
}


class CatalogLoadError(ValueError):
    """Raised when a movie record is missing or mistyping a field."""


def _parse_record(position: int, record: Any) -> Movie:
    if not isinstance(record, Mapping):
        raise CatalogLoadError(f"Record {position} is not an object")

    values = {}
    for attr, (key, types) in _FIELDS.items():
        if key not in record or record[key] is None:
            raise CatalogLoadError(f"Record {position} is missing '{key}'")
        value = record[key]
        # bool is an int subclass; never accept it as a number
        if isinstance(value, bool) or not isinstance(value, types):
            raise CatalogLoadError(
                f"Record {position} has invalid '{key}': {value!r}"
            )
        values[attr] = value

    if values['id'] <= 0:
        raise CatalogLoadError(
            f"Record {position} has non-positive id: {values['id']}"
        )
    values['rating'] = float(values['rating'])
    return Movie(**values)


def parse_movies(records: Sequence[Mapping[str, Any]]) -> Tuple[Movie, ...]:
    """
    Parse decoded movie records, preserving source order.

    Args:
        records: Sequence of mappings with keys id, movieName, director,
            year, genre, description, duration, imdbRating

    Returns:
        Tuple of Movie objects

    Raises:
        CatalogLoadError: If the input is not a list or any record is invalid
    """
    if not isinstance(records, (list, tuple)):
        raise CatalogLoadError(
            f"Expected a list of movie records, got {type(records).__name__}"
        )
    return tuple(_parse_record(i, record) for i, record in enumerate(records))


def _read_source(source: MovieSource) -> Any:
    if isinstance(source, (str, Path)):
        with open(source, 'r', encoding='utf-8') as f:
            return json.load(f)
    if hasattr(source, 'read'):
        return json.load(source)
    return source


def load_movies(source: MovieSource) -> Tuple[Movie, ...]:
    """
    Load movies from a JSON file, text stream, or decoded list.

    Any read or parse failure is logged and yields an empty tuple; the
    whole load either succeeds or produces nothing.

    Args:
        source: Path to a JSON file, an open text stream, or a list of records

    Returns:
        Tuple of Movie objects (empty on failure)
    """
    try:
        movies = parse_movies(_read_source(source))
    except (OSError, ValueError, RecursionError) as e:
        # ValueError covers JSONDecodeError, UnicodeDecodeError and CatalogLoadError
        logger.error(f"Failed to load movies from JSON: {e}")
        return ()

    logger.info(f"Loaded {len(movies)} movies")
    return movies
