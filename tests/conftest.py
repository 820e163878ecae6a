"""
Shared fixtures: a small in-memory catalog used across test modules.
"""

import pytest

from app.core.catalog import Catalog, CatalogService, parse_movies
from app.core.reviews import JsonReviewStore


def make_record(movie_id, name, genre, **overrides):
    """Build a raw movie record in source JSON format."""
    record = {
        "id": movie_id,
        "movieName": name,
        "director": "Some Director",
        "year": 2000,
        "genre": genre,
        "description": f"About {name}",
        "duration": 120,
        "imdbRating": 4.5,
    }
    record.update(overrides)
    return record


@pytest.fixture
def record_factory():
    """Factory for raw movie records."""
    return make_record


@pytest.fixture
def movie_records():
    """Raw records covering plain and compound genres."""
    return [
        make_record(1, "The Prison Escape", "Drama", year=1994, duration=142, imdbRating=5.0),
        make_record(2, "The Family Boss", "Crime/Drama", year=1972, duration=175),
        make_record(3, "The Masked Hero", "Action/Crime", year=2008),
        make_record(4, "Urban Stories", "Crime/Drama", year=1994),
        make_record(5, "Life Journey", "Drama", year=1994, imdbRating=4),
    ]


@pytest.fixture
def review_records():
    """Raw review records in source JSON format."""
    return [
        {"movieId": 1, "userName": "Alice", "avatarEmoji": "👩", "rating": 5.0, "comment": "Great"},
        {"movieId": 1, "userName": "Bob", "avatarEmoji": "👨", "rating": 4.0, "comment": "Good"},
        {"movieId": 3, "userName": "Dan", "rating": 3.5, "comment": "Fine"},
    ]


@pytest.fixture
def catalog(movie_records):
    """Catalog built from the sample records."""
    return Catalog.from_movies(parse_movies(movie_records))


@pytest.fixture
def service(catalog, review_records):
    """CatalogService over the sample catalog with a review store."""
    return CatalogService(catalog, review_lookup=JsonReviewStore(review_records))
