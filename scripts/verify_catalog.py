#!/usr/bin/env python
"""
Catalog verification script.

Loads the movie catalog the same way the API does and reports:
1. Basic statistics (movies, genres, reviews)
2. Duplicate ids
3. Sample queries

Usage:
    # Full verification of the configured catalog
    python scripts/verify_catalog.py

    # Check a specific file
    python scripts/verify_catalog.py --catalog data/movies.json

Exits with status 1 when the catalog is empty or has duplicate ids.
"""

import sys
import argparse
from collections import Counter

from app.api.config import get_catalog_path, get_reviews_path
from app.core.catalog import CatalogService
from app.core.reviews import JsonReviewStore
from app.utils.logging_config import setup_logging


def print_section(title):
    """Print a formatted section header."""
    print(f"\n{'='*60}")
    print(f"{title}")
    print('='*60)


def check_basic_stats(service, reviews):
    """Print counts; fail on an empty catalog."""
    print_section("1. Catalog Statistics")

    movies = service.get_all()
    genres = service.get_all_genres()
    print(f"\nCatalog contents:")
    print(f"  Movies:  {len(movies):,}")
    print(f"  Genres:  {len(genres):,}")
    print(f"  Reviews: {len(reviews):,}")

    if not movies:
        print("\n[ERROR] Catalog is empty (see log for load errors)")
        return False
    return True


def check_duplicates(service):
    """Report ids that appear more than once."""
    print_section("2. Duplicate IDs")

    counts = Counter(movie.id for movie in service.get_all())
    duplicates = {movie_id: n for movie_id, n in counts.items() if n > 1}
    if duplicates:
        for movie_id, n in sorted(duplicates.items()):
            kept = service.get_by_id(movie_id)
            print(f"  [WARNING] id {movie_id} appears {n} times; lookup returns '{kept.name}'")
        return False

    print("\n[SUCCESS] All movie ids are unique")
    return True


def run_sample_queries(service):
    """Run a few searches and print result counts."""
    print_section("3. Sample Queries")

    for genre in service.get_all_genres():
        print(f"  genre='{genre}': {len(service.search(genre=genre))} movies")

    first = service.get_all()[0] if service.get_all() else None
    if first is not None:
        word = first.name.split()[-1]
        print(f"  name='{word}': {len(service.search(name=word))} movies")


def main():
    parser = argparse.ArgumentParser(description="Verify the movie catalog")
    parser.add_argument("--catalog", default=get_catalog_path(), help="Movie catalog JSON path")
    parser.add_argument("--reviews", default=get_reviews_path(), help="Reviews JSON path")
    args = parser.parse_args()

    setup_logging(level="WARNING")

    reviews = JsonReviewStore(args.reviews)
    service = CatalogService.from_source(args.catalog, review_lookup=reviews)

    passed = check_basic_stats(service, reviews)
    if passed:
        passed = check_duplicates(service) and passed
        run_sample_queries(service)

    print_section("Result")
    print("\n[SUCCESS] Catalog verified" if passed else "\n[FAILED] Catalog has problems")
    return 0 if passed else 1


if __name__ == "__main__":
    sys.exit(main())
