"""Comment-related Pydantic schemas."""

from pydantic import Field

from .common import CamelModel


class CommentCreate(CamelModel):
    """Schema for adding a comment to a post."""

    id: str = Field(..., min_length=1, description="Client-chosen unique id")
    timestamp: int
    body: str
    author: str
    parent_id: str = Field(..., description="Id of the post being commented on")


class CommentUpdate(CamelModel):
    """Schema for editing a comment. Omitted fields are left unchanged."""

    timestamp: int | None = None
    body: str | None = None


class CommentResponse(CamelModel):
    """Schema for comment information returned by the API."""

    id: str
    timestamp: int
    body: str
    author: str
    parent_id: str
    vote_score: int
    deleted: bool
    parent_deleted: bool
