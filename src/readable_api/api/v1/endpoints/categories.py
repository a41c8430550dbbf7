# src/readable_api/api/v1/endpoints/categories.py
"""Category endpoints for the Readable API."""

from fastapi import APIRouter

from readable_api.api.v1.dependencies import CategoryRegistryDep, PostStoreDep, TokenDep
from readable_api.models import Post
from readable_api.schemas.category import CategoryListResponse, CategoryResponse
from readable_api.schemas.post import PostResponse

router = APIRouter(tags=["categories"])


@router.get("/categories", response_model=CategoryListResponse)
async def list_categories(
    registry: CategoryRegistryDep,
    token: TokenDep,
) -> CategoryListResponse:
    """Get all categories available to the caller."""
    categories = registry.list_categories(token)
    return CategoryListResponse(
        categories=[CategoryResponse.model_validate(c) for c in categories]
    )


@router.get("/{category}/posts", response_model=list[PostResponse])
async def list_category_posts(category: str, posts: PostStoreDep) -> list[PostResponse]:
    """Get all posts filed under one category path.

    Registered ahead of the post and comment routers, so ``/posts/posts``
    lists the ``posts`` category rather than fetching a post with id ``posts``.
    """
    return _to_responses(posts.list_by_category(category))


def _to_responses(items: list[Post]) -> list[PostResponse]:
    return [PostResponse.model_validate(p) for p in items]
