"""Tenant-scoped store services for the Readable API."""

from .cascade import CascadeCoordinator, CascadeResult
from .categories import CategoryRegistry
from .comments import CommentStore
from .identity import DEFAULT_CATEGORIES, IdentitySpace, categories_from_config
from .posts import PostStore

__all__ = [
    "CascadeCoordinator", "CascadeResult",
    "CategoryRegistry",
    "CommentStore",
    "DEFAULT_CATEGORIES", "IdentitySpace", "categories_from_config",
    "PostStore",
]
