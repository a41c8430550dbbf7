# tests/services/test_identity.py
"""Tests for tenant resolution and isolation."""

import pytest

from readable_api.models import Category
from readable_api.services import (
    DEFAULT_CATEGORIES,
    IdentitySpace,
    PostStore,
    categories_from_config,
)
from tests.conftest import post_fields


def test_resolve_seeds_default_categories(identity_space) -> None:
    """A new tenant starts with the three default categories and nothing else."""
    dataset = identity_space.resolve("fresh-token")
    assert [c.path for c in dataset.categories] == ["react", "redux", "udacity"]
    assert dataset.posts == {}
    assert dataset.comments == {}


def test_resolve_returns_same_dataset_for_same_token(identity_space) -> None:
    """Repeated resolution hands back the one dataset owned by the tenant."""
    first = identity_space.resolve("token")
    assert identity_space.resolve("token") is first
    assert identity_space.tenant_count() == 1


def test_tenants_get_independent_category_copies(identity_space) -> None:
    """Changing one tenant's categories never leaks into another tenant or the seed."""
    a = identity_space.resolve("a")
    b = identity_space.resolve("b")
    a.categories.append(Category(name="python", path="python"))
    assert len(b.categories) == 3
    assert len(identity_space.seed) == 3
    assert a.categories is not b.categories


def test_same_post_id_in_two_tenants_never_collides(identity_space) -> None:
    """Datasets are fully isolated, so ids only need to be unique per tenant."""
    store_a = PostStore(identity_space.resolve("a"))
    store_b = PostStore(identity_space.resolve("b"))
    store_a.create(**post_fields("shared", title="from a"))
    store_b.create(**post_fields("shared", title="from b"))

    assert store_a.get("shared").title == "from a"
    assert store_b.get("shared").title == "from b"
    assert len(store_a.list_all()) == 1
    assert len(store_b.list_all()) == 1


def test_empty_token_is_rejected(identity_space) -> None:
    """The empty string is not a tenant key."""
    with pytest.raises(ValueError):
        identity_space.resolve("")
    assert identity_space.tenant_count() == 0


def test_unbounded_by_default(identity_space) -> None:
    """Without a limit every tenant is kept."""
    for i in range(50):
        identity_space.resolve(f"token-{i}")
    assert identity_space.tenant_count() == 50
    assert "token-0" in identity_space


def test_max_tenants_evicts_least_recently_used() -> None:
    """With a bound, the tenant resolved longest ago is dropped first."""
    space = IdentitySpace(max_tenants=2)
    space.resolve("a")
    space.resolve("b")
    space.resolve("a")
    space.resolve("c")

    assert "a" in space
    assert "b" not in space
    assert "c" in space
    assert space.tenant_count() == 2


def test_max_tenants_must_be_positive() -> None:
    with pytest.raises(ValueError):
        IdentitySpace(max_tenants=0)


def test_categories_from_config_defaults_path_to_name() -> None:
    """Configured categories without a path use their name as the path."""
    seed = categories_from_config([{"name": "python"}, {"name": "Go Lang", "path": "go"}])
    assert seed == [Category(name="python", path="python"), Category(name="Go Lang", path="go")]


def test_custom_seed_is_used_for_new_tenants() -> None:
    space = IdentitySpace([Category(name="python", path="python")])
    assert [c.path for c in space.resolve("t").categories] == ["python"]
    assert DEFAULT_CATEGORIES[0].path == "react"
