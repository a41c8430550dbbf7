"""Post records and vote options."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class VoteOption(str, Enum):
    """Recognized vote options and the score delta each applies."""

    UP_VOTE = "upVote"
    DOWN_VOTE = "downVote"

    @property
    def delta(self) -> int:
        return 1 if self is VoteOption.UP_VOTE else -1

    @classmethod
    def parse(cls, option: object) -> VoteOption | None:
        """Return the matching option, or None for anything unrecognized."""
        try:
            return cls(option)
        except (ValueError, TypeError):
            return None


@dataclass
class Post:
    """Top-level content entity.

    ``category`` should name a ``Category.path`` but is not checked.
    ``deleted`` is a soft-delete flag and never goes back to False.
    """

    id: str
    timestamp: int
    title: str
    body: str
    author: str
    category: str
    vote_score: int = 1
    deleted: bool = False
    # Non-deleted comments whose parent_id is this post, counted when a copy
    # is handed out; the stored record keeps 0. Deleting the post does not
    # reset it.
    comment_count: int = 0
