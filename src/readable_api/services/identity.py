"""Tenant resolution: one private dataset per caller token."""

from __future__ import annotations

import logging
from collections import OrderedDict
from collections.abc import Iterable, Mapping
from threading import Lock

from readable_api.models import Category, Dataset

logger = logging.getLogger(__name__)

DEFAULT_CATEGORIES: tuple[Category, ...] = (
    Category(name="react", path="react"),
    Category(name="redux", path="redux"),
    Category(name="udacity", path="udacity"),
)


def categories_from_config(entries: Iterable[Mapping[str, str]]) -> list[Category]:
    """Build seed categories from settings entries such as ``{"name": ..., "path": ...}``.

    A missing ``path`` falls back to the name.
    """
    seed = []
    for entry in entries:
        name = entry["name"]
        seed.append(Category(name=name, path=entry.get("path") or name))
    return seed


class IdentitySpace:
    """Map of opaque tokens to tenant datasets, created lazily on first use.

    Tenants live for the lifetime of the object unless ``max_tenants`` is set,
    in which case the least recently resolved tenant is dropped once the bound
    is exceeded.
    """

    def __init__(
        self,
        seed: Iterable[Category] = DEFAULT_CATEGORIES,
        *,
        max_tenants: int | None = None,
    ) -> None:
        if max_tenants is not None and max_tenants < 1:
            raise ValueError("max_tenants must be positive or None")
        self._seed = tuple(seed)
        self._max_tenants = max_tenants
        self._tenants: OrderedDict[str, Dataset] = OrderedDict()
        self._lock = Lock()

    def resolve(self, token: str) -> Dataset:
        """Return the dataset for ``token``, seeding it on first call."""
        if not token:
            raise ValueError("token must be a non-empty string")
        with self._lock:
            dataset = self._tenants.get(token)
            if dataset is not None:
                if self._max_tenants is not None:
                    self._tenants.move_to_end(token)
                return dataset

            dataset = Dataset.seeded(self._seed)
            self._tenants[token] = dataset
            logger.info("Created dataset for new tenant (%d active)", len(self._tenants))
            self._evict_overflow()
            return dataset

    def _evict_overflow(self) -> None:
        if self._max_tenants is None:
            return
        while len(self._tenants) > self._max_tenants:
            self._tenants.popitem(last=False)
            logger.warning(
                "Evicted least recently used tenant dataset (limit %d)", self._max_tenants
            )

    def tenant_count(self) -> int:
        """Return how many tenant datasets are currently held."""
        with self._lock:
            return len(self._tenants)

    def __contains__(self, token: object) -> bool:
        with self._lock:
            return token in self._tenants

    @property
    def seed(self) -> tuple[Category, ...]:
        """Categories every new tenant starts with."""
        return self._seed
