"""
Movie API endpoints.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from app.api.dependencies import get_catalog_service
from app.api.models.movie import MovieResponse, MovieBrowse, MovieDetails
from app.api.models.review import ReviewResponse
from app.api.models.search import SearchResponse
from app.core.catalog import CatalogService
from app.utils.movie_icons import get_movie_icon

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/movies", tags=["movies"])


def _has_criteria(name: str | None, movie_id: int | None, genre: str | None) -> bool:
    return bool(
        (name and name.strip())
        or movie_id is not None
        or (genre and genre.strip())
    )


def _plural(count: int) -> str:
    return "" if count == 1 else "s"


def _to_responses(movies) -> list[MovieResponse]:
    return [MovieResponse.model_validate(m) for m in movies]


@router.get("", response_model=MovieBrowse)
def browse_movies(
    name: str | None = Query(None),
    movie_id: int | None = Query(None, alias="id"),
    genre: str | None = Query(None),
    catalog: CatalogService = Depends(get_catalog_service),
):
    """Browse movies; with criteria, search and fall back to all on no match."""
    logger.info(
        f"Browse movies - name: '{name}', id: '{movie_id}', genre: '{genre}'"
    )
    search_message = ""
    if _has_criteria(name, movie_id, genre):
        movies = catalog.search(name, movie_id, genre)
        if not movies:
            search_message = (
                "No movies found matching your search. "
                "Try different criteria or browse all movies below."
            )
            movies = catalog.get_all()
        else:
            search_message = (
                f"Found {len(movies)} movie{_plural(len(movies))} matching your search."
            )
    else:
        movies = catalog.get_all()

    return MovieBrowse(
        movies=_to_responses(movies),
        total=len(movies),
        search_message=search_message,
        genres=catalog.get_all_genres(),
        search_name=name or "",
        search_id=str(movie_id) if movie_id is not None else "",
        search_genre=genre or "",
    )


@router.get("/search", response_model=SearchResponse)
def search_movies(
    response: Response,
    name: str | None = Query(None),
    movie_id: int | None = Query(None, alias="id"),
    genre: str | None = Query(None),
    catalog: CatalogService = Depends(get_catalog_service),
):
    """Search movies by name, id and genre (all supplied criteria must match)."""
    logger.info(
        f"Search request - name: '{name}', id: '{movie_id}', genre: '{genre}'"
    )

    if not _has_criteria(name, movie_id, genre):
        response.status_code = 400
        return SearchResponse(
            success=False,
            message="Provide at least one search criterion: 'name', 'id' or 'genre'.",
            movies=_to_responses(catalog.get_all()),
        )

    if movie_id is not None and movie_id <= 0:
        response.status_code = 400
        return SearchResponse(
            success=False,
            message="Invalid movie ID: it must be a positive number.",
        )

    try:
        results = catalog.search(name, movie_id, genre)
    except Exception as e:
        logger.error(f"Error during movie search: {e}", exc_info=True)
        response.status_code = 500
        return SearchResponse(
            success=False,
            message="Something went wrong while searching for movies. Try again later.",
        )

    if results:
        message = f"Found {len(results)} movie{_plural(len(results))}."
    else:
        message = "No movies found matching your search."

    criteria = {}
    if name and name.strip():
        criteria["name"] = name.strip()
    if movie_id is not None:
        criteria["id"] = movie_id
    if genre and genre.strip():
        criteria["genre"] = genre.strip()

    return SearchResponse(
        success=True,
        message=message,
        movies=_to_responses(results),
        total_results=len(results),
        search_criteria=criteria,
    )


@router.get("/genres", response_model=list[str])
def list_genres(catalog: CatalogService = Depends(get_catalog_service)):
    """List distinct genres, sorted, for filter controls."""
    return catalog.get_all_genres()


@router.get("/{movie_id}", response_model=MovieDetails)
def get_movie(movie_id: int, catalog: CatalogService = Depends(get_catalog_service)):
    """Get movie details, icon and reviews by ID."""
    movie = catalog.get_by_id(movie_id)
    if movie is None:
        logger.warning(f"Movie with ID {movie_id} not found")
        raise HTTPException(status_code=404, detail=f"Movie with ID {movie_id} not found")
    return MovieDetails(
        movie=MovieResponse.model_validate(movie),
        icon=get_movie_icon(movie.name),
        reviews=[ReviewResponse.model_validate(r) for r in catalog.reviews_for(movie.id)],
    )
