# src/readable_api/api/v1/endpoints/__init__.py
"""API endpoint modules for version 1."""

from .categories import router as categories_router
from .comments import router as comments_router
from .posts import router as posts_router

__all__ = [
    "categories_router",
    "comments_router",
    "posts_router",
]
