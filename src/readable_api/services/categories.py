"""Category listing per tenant."""

from __future__ import annotations

from readable_api.models import Category
from readable_api.services.identity import IdentitySpace


class CategoryRegistry:
    """Read access to each tenant's seeded categories."""

    def __init__(self, identity: IdentitySpace) -> None:
        self._identity = identity

    def list_categories(self, token: str) -> list[Category]:
        """Return the tenant's categories in insertion order."""
        dataset = self._identity.resolve(token)
        with dataset.lock:
            return list(dataset.categories)
