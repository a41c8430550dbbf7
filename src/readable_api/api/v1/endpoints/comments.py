# src/readable_api/api/v1/endpoints/comments.py
"""Comment-related endpoints for the Readable API."""

from fastapi import APIRouter, status

from readable_api.api.v1.dependencies import CommentStoreDep
from readable_api.schemas.comment import CommentCreate, CommentResponse, CommentUpdate
from readable_api.schemas.common import ErrorResponse, VoteRequest

router = APIRouter(
    prefix="/comments",
    tags=["comments"],
    responses={
        status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
        status.HTTP_409_CONFLICT: {"model": ErrorResponse},
    },
)


@router.post("", response_model=CommentResponse, status_code=status.HTTP_201_CREATED)
async def create_comment(payload: CommentCreate, comments: CommentStoreDep) -> CommentResponse:
    """Add a comment to a post.

    The parent id is stored as given; an unknown parent is not rejected.
    """
    comment = comments.create(
        comment_id=payload.id,
        timestamp=payload.timestamp,
        body=payload.body,
        author=payload.author,
        parent_id=payload.parent_id,
    )
    return CommentResponse.model_validate(comment)


@router.get("/{comment_id}", response_model=CommentResponse)
async def get_comment(comment_id: str, comments: CommentStoreDep) -> CommentResponse:
    return CommentResponse.model_validate(comments.get(comment_id))


@router.post("/{comment_id}", response_model=CommentResponse)
async def vote_on_comment(
    comment_id: str,
    vote: VoteRequest,
    comments: CommentStoreDep,
) -> CommentResponse:
    """Vote on a comment with ``{"option": "upVote" | "downVote"}``."""
    return CommentResponse.model_validate(comments.vote(comment_id, vote.option))


@router.put("/{comment_id}", response_model=CommentResponse)
async def edit_comment(
    comment_id: str,
    changes: CommentUpdate,
    comments: CommentStoreDep,
) -> CommentResponse:
    """Edit the timestamp and/or body of an existing comment."""
    comment = comments.edit(comment_id, timestamp=changes.timestamp, body=changes.body)
    return CommentResponse.model_validate(comment)


@router.delete("/{comment_id}", response_model=CommentResponse)
async def delete_comment(comment_id: str, comments: CommentStoreDep) -> CommentResponse:
    """Set the comment's deleted flag."""
    return CommentResponse.model_validate(comments.disable(comment_id))
