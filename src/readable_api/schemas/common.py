"""Shared Pydantic schema configuration."""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema whose JSON keys are camelCase (``voteScore``, ``parentId``)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class VoteRequest(CamelModel):
    """Body of ``POST /posts/{id}`` and ``POST /comments/{id}``."""

    # Left unvalidated so the store applies its vote option policy to
    # missing or malformed values.
    option: Any = Field(None, description="'upVote' or 'downVote'")


class ErrorDetail(BaseModel):
    """Error payload returned for store failures."""

    code: str
    message: str


class ErrorResponse(BaseModel):
    error: ErrorDetail
