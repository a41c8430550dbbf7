"""Shared API dependencies for tenant resolution and store access."""

from typing import Annotated

from fastapi import Depends, Header, Request

from readable_api.core.errors import MissingTokenError
from readable_api.core.settings import settings
from readable_api.models import Dataset
from readable_api.services import (
    CascadeCoordinator,
    CategoryRegistry,
    CommentStore,
    IdentitySpace,
    PostStore,
)


def get_identity_space(request: Request) -> IdentitySpace:
    """Return the process-wide identity space created at application start."""
    return request.app.state.identity_space


IdentitySpaceDep = Annotated[IdentitySpace, Depends(get_identity_space)]


def get_token(authorization: Annotated[str | None, Header()] = None) -> str:
    """Extract the tenant token from the Authorization header.

    The header value is used verbatim as an opaque tenant key.

    Raises:
        MissingTokenError: Mapped to 403 when the header is missing or empty.
    """
    if not authorization:
        raise MissingTokenError()
    return authorization


TokenDep = Annotated[str, Depends(get_token)]


def get_dataset(identity: IdentitySpaceDep, token: TokenDep) -> Dataset:
    """Resolve the caller's dataset."""
    return identity.resolve(token)


DatasetDep = Annotated[Dataset, Depends(get_dataset)]


def get_category_registry(identity: IdentitySpaceDep) -> CategoryRegistry:
    return CategoryRegistry(identity)


def get_post_store(dataset: DatasetDep) -> PostStore:
    """Return a post store bound to the caller's dataset."""
    return PostStore(dataset, strict_votes=settings.strict_vote_options)


PostStoreDep = Annotated[PostStore, Depends(get_post_store)]


def get_comment_store(dataset: DatasetDep) -> CommentStore:
    """Return a comment store bound to the caller's dataset."""
    return CommentStore(dataset, strict_votes=settings.strict_vote_options)


CommentStoreDep = Annotated[CommentStore, Depends(get_comment_store)]


def get_cascade(posts: PostStoreDep, comments: CommentStoreDep) -> CascadeCoordinator:
    return CascadeCoordinator(posts, comments)


CategoryRegistryDep = Annotated[CategoryRegistry, Depends(get_category_registry)]
CascadeDep = Annotated[CascadeCoordinator, Depends(get_cascade)]
