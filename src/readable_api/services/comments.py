"""Comment operations scoped to one tenant dataset."""

from __future__ import annotations

import logging
from dataclasses import replace

from readable_api.core.errors import DuplicateIdError, NotFoundError
from readable_api.models import Comment, Dataset
from readable_api.services.voting import apply_vote

logger = logging.getLogger(__name__)

__all__ = ["CommentStore"]


class CommentStore:
    """CRUD, voting and soft delete over a tenant's comments.

    Comments point at posts by id only. Creating a comment does not check
    that its parent exists.
    """

    def __init__(
        self,
        dataset: Dataset,
        *,
        strict_votes: bool = False,
    ) -> None:
        self.dataset = dataset
        self.strict_votes = strict_votes

    def list_by_parent(self, post_id: str) -> list[Comment]:
        """Return every comment under ``post_id`` in insertion order."""
        with self.dataset.lock:
            return [replace(c) for c in self._children(post_id)]

    def create(
        self,
        *,
        comment_id: str,
        timestamp: int,
        body: str,
        author: str,
        parent_id: str,
    ) -> Comment:
        """Store a new comment and return it.

        Raises:
            DuplicateIdError: If the tenant already has a comment with ``comment_id``.
        """
        with self.dataset.lock:
            if comment_id in self.dataset.comments:
                raise DuplicateIdError("comment", comment_id)
            comment = Comment(
                id=comment_id,
                timestamp=timestamp,
                body=body,
                author=author,
                parent_id=parent_id,
            )
            self.dataset.comments[comment_id] = comment
            if parent_id not in self.dataset.posts:
                logger.debug(
                    "Comment %s references unknown post %s",
                    comment_id,
                    parent_id,
                    extra={"comment_id": comment_id, "post_id": parent_id},
                )
            return replace(comment)

    def get(self, comment_id: str) -> Comment:
        with self.dataset.lock:
            return replace(self._require(comment_id))

    def edit(
        self,
        comment_id: str,
        *,
        timestamp: int | None = None,
        body: str | None = None,
    ) -> Comment:
        """Update the supplied fields only; None means leave unchanged."""
        with self.dataset.lock:
            comment = self._require(comment_id)
            if timestamp is not None:
                comment.timestamp = timestamp
            if body is not None:
                comment.body = body
            return replace(comment)

    def vote(self, comment_id: str, option: object) -> Comment:
        with self.dataset.lock:
            comment = self._require(comment_id)
            apply_vote(comment, option, strict=self.strict_votes)
            return replace(comment)

    def disable(self, comment_id: str) -> Comment:
        """Soft delete a comment. Calling it again changes nothing."""
        with self.dataset.lock:
            comment = self._require(comment_id)
            comment.deleted = True
            return replace(comment)

    def disable_by_parent(self, post_id: str) -> list[Comment]:
        """Flag every comment under ``post_id`` as parent-deleted and return them."""
        with self.dataset.lock:
            children = self._children(post_id)
            for comment in children:
                comment.parent_deleted = True
            return [replace(c) for c in children]

    def _children(self, post_id: str) -> list[Comment]:
        return [c for c in self.dataset.comments.values() if c.parent_id == post_id]

    def _require(self, comment_id: str) -> Comment:
        comment = self.dataset.comments.get(comment_id)
        if comment is None:
            raise NotFoundError("comment", comment_id)
        return comment
