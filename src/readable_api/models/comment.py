"""Comment records."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Comment:
    """Reply to a post, linked by ``parent_id`` (a plain id lookup, not ownership).

    ``deleted`` and ``parent_deleted`` are independent soft-delete flags.
    """

    id: str
    timestamp: int
    body: str
    author: str
    parent_id: str
    vote_score: int = 1
    deleted: bool = False
    parent_deleted: bool = False
