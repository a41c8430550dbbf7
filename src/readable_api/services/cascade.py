"""Two-step post deletion: the post first, then its comments."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from readable_api.models import Comment, Post
from readable_api.services.comments import CommentStore
from readable_api.services.posts import PostStore

logger = logging.getLogger(__name__)


@dataclass
class CascadeResult:
    """Outcome of a cascading delete."""

    post: Post
    comments: list[Comment] = field(default_factory=list)


class CascadeCoordinator:
    """Sequence ``PostStore.disable`` before ``CommentStore.disable_by_parent``."""

    def __init__(self, posts: PostStore, comments: CommentStore) -> None:
        if posts.dataset is not comments.dataset:
            raise ValueError("post and comment stores must share one tenant dataset")
        self.posts = posts
        self.comments = comments

    def delete_post_cascade(self, post_id: str) -> CascadeResult:
        """Soft delete a post and mark its comments as parent-deleted.

        Both steps run under the tenant lock. If the post does not exist,
        ``NotFoundError`` propagates and no comment is touched.
        """
        with self.posts.dataset.lock:
            post = self.posts.disable(post_id)
            children = self.comments.disable_by_parent(post_id)
        logger.info(
            "Deleted post %s; flagged %d comment(s)",
            post_id,
            len(children),
            extra={"post_id": post_id},
        )
        return CascadeResult(post=post, comments=children)
