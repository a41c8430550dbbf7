"""Post-related Pydantic schemas."""

from pydantic import Field

from .common import CamelModel


class PostCreate(CamelModel):
    """Schema for creating a new post; the client supplies the id."""

    id: str = Field(..., min_length=1, description="Client-chosen unique id, e.g. a UUID")
    timestamp: int = Field(..., description="Creation time, e.g. Date.now()")
    title: str
    body: str
    author: str
    category: str = Field(..., description="Path of the category to file under")


class PostUpdate(CamelModel):
    """Schema for editing a post. Omitted fields are left unchanged."""

    title: str | None = None
    body: str | None = None


class PostResponse(CamelModel):
    """Schema for post information returned by the API."""

    id: str
    timestamp: int
    title: str
    body: str
    author: str
    category: str
    vote_score: int
    deleted: bool
    comment_count: int
