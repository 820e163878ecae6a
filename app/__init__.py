"""
Movie Catalog Application Package.

This package contains the in-memory catalog core, the HTTP API,
the Streamlit UI and shared utilities.
"""

__version__ = "1.0.0"
