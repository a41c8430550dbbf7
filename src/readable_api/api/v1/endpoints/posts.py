# src/readable_api/api/v1/endpoints/posts.py
"""Post-related endpoints for the Readable API."""

from fastapi import APIRouter, status

from readable_api.api.v1.dependencies import CascadeDep, CommentStoreDep, PostStoreDep
from readable_api.schemas.comment import CommentResponse
from readable_api.schemas.common import ErrorResponse, VoteRequest
from readable_api.schemas.post import PostCreate, PostResponse, PostUpdate

router = APIRouter(
    prefix="/posts",
    tags=["posts"],
    responses={
        status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
        status.HTTP_409_CONFLICT: {"model": ErrorResponse},
    },
)


@router.get("", response_model=list[PostResponse])
async def list_posts(posts: PostStoreDep) -> list[PostResponse]:
    """Get every post; useful for the home page when no category is selected.

    Deleted posts are included with ``deleted`` set so clients can decide
    how to present them.
    """
    return [PostResponse.model_validate(p) for p in posts.list_all()]


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(payload: PostCreate, posts: PostStoreDep) -> PostResponse:
    """Add a new post.

    Raises:
        DuplicateIdError: Mapped to 409 when the id is already taken.
    """
    post = posts.create(
        post_id=payload.id,
        timestamp=payload.timestamp,
        title=payload.title,
        body=payload.body,
        author=payload.author,
        category=payload.category,
    )
    return PostResponse.model_validate(post)


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(post_id: str, posts: PostStoreDep) -> PostResponse:
    """Get the details of a single post."""
    return PostResponse.model_validate(posts.get(post_id))


@router.post("/{post_id}", response_model=PostResponse)
async def vote_on_post(post_id: str, vote: VoteRequest, posts: PostStoreDep) -> PostResponse:
    """Vote on a post with ``{"option": "upVote" | "downVote"}``."""
    return PostResponse.model_validate(posts.vote(post_id, vote.option))


@router.put("/{post_id}", response_model=PostResponse)
async def edit_post(post_id: str, changes: PostUpdate, posts: PostStoreDep) -> PostResponse:
    """Edit the title and/or body of an existing post."""
    post = posts.edit(post_id, title=changes.title, body=changes.body)
    return PostResponse.model_validate(post)


@router.delete("/{post_id}", response_model=PostResponse)
async def delete_post(post_id: str, cascade: CascadeDep) -> PostResponse:
    """Soft delete a post and flag all of its comments as parent-deleted."""
    result = cascade.delete_post_cascade(post_id)
    return PostResponse.model_validate(result.post)


@router.get("/{post_id}/comments", response_model=list[CommentResponse])
async def list_post_comments(post_id: str, comments: CommentStoreDep) -> list[CommentResponse]:
    """Get all comments for a single post."""
    return [CommentResponse.model_validate(c) for c in comments.list_by_parent(post_id)]
