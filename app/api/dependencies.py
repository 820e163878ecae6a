"""
FastAPI dependency injection for the catalog service.
"""

import logging
import threading

from app.core.catalog import CatalogService
from app.core.reviews import JsonReviewStore
from app.api.config import get_catalog_path, get_reviews_path

logger = logging.getLogger(__name__)

# Singleton catalog service, built on first use
_catalog_service: CatalogService | None = None
_lock = threading.Lock()


def get_catalog_service() -> CatalogService:
    """Get or create singleton CatalogService."""
    global _catalog_service
    if _catalog_service is None:
        with _lock:
            if _catalog_service is None:
                catalog_path = get_catalog_path()
                logger.info(f"Loading movie catalog from {catalog_path}")
                _catalog_service = CatalogService.from_source(
                    catalog_path,
                    review_lookup=JsonReviewStore(get_reviews_path()),
                )
    return _catalog_service
