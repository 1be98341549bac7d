"""
Cinevault API package.

Provides the FastAPI application for the movie catalog service.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
