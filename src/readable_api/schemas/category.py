"""Category-related Pydantic schemas."""

from pydantic import Field

from .common import CamelModel


class CategoryResponse(CamelModel):
    """Schema for a category returned by the API."""

    name: str
    path: str


class CategoryListResponse(CamelModel):
    """Wrapper matching the ``{"categories": [...]}`` shape clients expect."""

    categories: list[CategoryResponse] = Field(default_factory=list)
