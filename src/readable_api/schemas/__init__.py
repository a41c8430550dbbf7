"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .category import CategoryListResponse, CategoryResponse
from .comment import CommentCreate, CommentResponse, CommentUpdate
from .common import ErrorResponse, VoteRequest
from .post import PostCreate, PostResponse, PostUpdate

__all__ = [
    "CategoryListResponse", "CategoryResponse",
    "CommentCreate", "CommentResponse", "CommentUpdate",
    "ErrorResponse", "VoteRequest",
    "PostCreate", "PostResponse", "PostUpdate",
]
