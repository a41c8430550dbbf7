"""Per-tenant dataset container."""

from __future__ import annotations

import copy
from collections.abc import Iterable
from dataclasses import dataclass, field
from threading import RLock

from .category import Category
from .comment import Comment
from .post import Post


@dataclass
class Dataset:
    """Categories, posts and comments owned by exactly one tenant.

    Dicts preserve insertion order, which is the listing order for posts and
    comments. ``lock`` guards every read-modify-write on this dataset.
    """

    categories: list[Category] = field(default_factory=list)
    posts: dict[str, Post] = field(default_factory=dict)
    comments: dict[str, Comment] = field(default_factory=dict)
    lock: RLock = field(default_factory=RLock, repr=False, compare=False)

    @classmethod
    def seeded(cls, categories: Iterable[Category]) -> Dataset:
        """Return a fresh dataset holding a private copy of ``categories``."""
        return cls(categories=copy.deepcopy(list(categories)))
