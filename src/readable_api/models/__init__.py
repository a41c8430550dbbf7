"""In-memory records held in each tenant's dataset."""

from .category import Category
from .comment import Comment
from .dataset import Dataset
from .post import Post, VoteOption

__all__ = [
    "Category",
    "Comment",
    "Dataset",
    "Post", "VoteOption",
]
