"""
Shared utilities package.

This package contains logging configuration and display helpers
used by the API and the UI.
"""

from app.utils.logging_config import setup_logging
from app.utils.movie_icons import get_movie_icon

__all__ = ['setup_logging', 'get_movie_icon']
