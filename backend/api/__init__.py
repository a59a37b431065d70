"""
WhyNot Innovations API package.

Provides the FastAPI application for the innovation portal.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
