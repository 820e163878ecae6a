"""
In-memory movie catalog.

This package contains:
- Movie record and Catalog snapshot
- JSON loader that never fails the process
- CatalogService with lookup, search and genre enumeration
"""

from app.core.catalog.models import Movie, Catalog
from app.core.catalog.loader import CatalogLoadError, parse_movies, load_movies
from app.core.catalog.service import CatalogService

__all__ = [
    'Movie',
    'Catalog',
    'CatalogLoadError',
    'parse_movies',
    'load_movies',
    'CatalogService',
]
