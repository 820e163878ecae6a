"""
System API endpoints (health).
"""

from fastapi import APIRouter, Depends

from app.api.dependencies import get_catalog_service
from app.core.catalog import CatalogService

router = APIRouter(prefix="/api", tags=["system"])


@router.get("/health")
def health_check(catalog: CatalogService = Depends(get_catalog_service)):
    """Health check: catalog loaded and movie count."""
    movie_count = len(catalog.get_all())
    return {
        "status": "healthy" if movie_count else "degraded",
        "movies": movie_count,
        "genres": len(catalog.get_all_genres()),
    }
