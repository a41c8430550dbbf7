"""Post operations scoped to one tenant dataset."""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import replace

from readable_api.core.errors import DuplicateIdError, NotFoundError
from readable_api.models import Dataset, Post
from readable_api.services.voting import apply_vote

logger = logging.getLogger(__name__)

__all__ = ["PostStore"]


class PostStore:
    """CRUD, voting and soft delete over a tenant's posts.

    Every method runs under the dataset lock and returns copies, so callers
    cannot change stored posts except through these operations. Copies carry
    ``comment_count`` computed from the comments present at read time.
    """

    def __init__(self, dataset: Dataset, *, strict_votes: bool = False) -> None:
        """Bind the store to a resolved tenant dataset."""
        self.dataset = dataset
        self.strict_votes = strict_votes

    def list_all(self) -> list[Post]:
        """Return every post, including deleted ones, in insertion order."""
        with self.dataset.lock:
            counts = self._live_comment_counts()
            return [self._snapshot(post, counts) for post in self.dataset.posts.values()]

    def list_by_category(self, path: str) -> list[Post]:
        """Return posts filed under ``path`` in insertion order."""
        with self.dataset.lock:
            counts = self._live_comment_counts()
            return [
                self._snapshot(post, counts)
                for post in self.dataset.posts.values()
                if post.category == path
            ]

    def create(
        self,
        *,
        post_id: str,
        timestamp: int,
        title: str,
        body: str,
        author: str,
        category: str,
    ) -> Post:
        """Store a new post with a score of 1 and return it.

        Raises:
            DuplicateIdError: If the tenant already has a post with ``post_id``.
        """
        with self.dataset.lock:
            if post_id in self.dataset.posts:
                raise DuplicateIdError("post", post_id)
            post = Post(
                id=post_id,
                timestamp=timestamp,
                title=title,
                body=body,
                author=author,
                category=category,
            )
            self.dataset.posts[post_id] = post
            logger.debug("Created post %s in category %s", post_id, category)
            return self._snapshot(post)

    def get(self, post_id: str) -> Post:
        """Return a post by id."""
        with self.dataset.lock:
            return self._snapshot(self._require(post_id))

    def edit(
        self,
        post_id: str,
        *,
        title: str | None = None,
        body: str | None = None,
    ) -> Post:
        """Update the supplied fields only; None means leave unchanged."""
        with self.dataset.lock:
            post = self._require(post_id)
            if title is not None:
                post.title = title
            if body is not None:
                post.body = body
            return self._snapshot(post)

    def vote(self, post_id: str, option: object) -> Post:
        """Apply an ``upVote``/``downVote`` and return the post."""
        with self.dataset.lock:
            post = self._require(post_id)
            apply_vote(post, option, strict=self.strict_votes)
            return self._snapshot(post)

    def disable(self, post_id: str) -> Post:
        """Soft delete a post. Calling it again changes nothing."""
        with self.dataset.lock:
            post = self._require(post_id)
            post.deleted = True
            return self._snapshot(post)

    def _live_comment_counts(self) -> Counter[str]:
        return Counter(
            c.parent_id for c in self.dataset.comments.values() if not c.deleted
        )

    def _snapshot(self, post: Post, counts: Counter[str] | None = None) -> Post:
        if counts is None:
            counts = self._live_comment_counts()
        return replace(post, comment_count=counts[post.id])

    def _require(self, post_id: str) -> Post:
        post = self.dataset.posts.get(post_id)
        if post is None:
            raise NotFoundError("post", post_id)
        return post
