"""
Review lookups keyed by movie id.
"""

from app.core.reviews.models import Review, ReviewLookup
from app.core.reviews.store import JsonReviewStore

__all__ = ['Review', 'ReviewLookup', 'JsonReviewStore']
