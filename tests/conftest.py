# tests/conftest.py
from __future__ import annotations

from collections.abc import Callable, Iterator
from itertools import count
from typing import Any

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from readable_api.api.v1.dependencies import get_identity_space
from readable_api.core.settings import settings
from readable_api.main import app as fastapi_app
from readable_api.models import Dataset
from readable_api.services import CascadeCoordinator, CommentStore, IdentitySpace, PostStore

_TIMESTAMPS = count(1_467_166_872_634)


@pytest.fixture()
def identity_space() -> IdentitySpace:
    """Provide a fresh, empty tenant map for each test."""
    return IdentitySpace()


@pytest.fixture()
def dataset(identity_space: IdentitySpace) -> Dataset:
    return identity_space.resolve("tenant-a")


@pytest.fixture()
def post_store(dataset: Dataset) -> PostStore:
    return PostStore(dataset)


@pytest.fixture()
def comment_store(dataset: Dataset) -> CommentStore:
    return CommentStore(dataset)


@pytest.fixture()
def cascade(post_store: PostStore, comment_store: CommentStore) -> CascadeCoordinator:
    return CascadeCoordinator(post_store, comment_store)


def post_fields(post_id: str = "p1", **overrides: Any) -> dict[str, Any]:
    """Return keyword arguments for ``PostStore.create``."""
    fields = {
        "post_id": post_id,
        "timestamp": next(_TIMESTAMPS),
        "title": "Udacity is the best place to learn React",
        "body": "Everyone says so after all.",
        "author": "thingtwo",
        "category": "react",
    }
    fields.update(overrides)
    return fields


def comment_fields(comment_id: str = "c1", parent_id: str = "p1", **overrides: Any) -> dict[str, Any]:
    """Return keyword arguments for ``CommentStore.create``."""
    fields = {
        "comment_id": comment_id,
        "timestamp": next(_TIMESTAMPS),
        "body": "Hi there! I am a COMMENT.",
        "author": "thingtwo",
        "parent_id": parent_id,
    }
    fields.update(overrides)
    return fields


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_identity_dependency(app: FastAPI, identity_space: IdentitySpace) -> Iterator[None]:
    app.dependency_overrides[get_identity_space] = lambda: identity_space
    try:
        yield
    finally:
        app.dependency_overrides.pop(get_identity_space, None)


@pytest.fixture()
def strict_votes() -> Iterator[None]:
    """Reject unrecognized vote options for the duration of a test."""
    previous = settings.strict_vote_options
    settings.strict_vote_options = True
    try:
        yield
    finally:
        settings.strict_vote_options = previous


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


@pytest.fixture()
def auth_headers() -> dict[str, str]:
    """Authorization headers for the primary tenant."""
    return {"Authorization": "tenant-a"}


@pytest.fixture()
def other_auth_headers() -> dict[str, str]:
    """Authorization headers for a second, unrelated tenant."""
    return {"Authorization": "tenant-b"}


@pytest.fixture()
def post_payload() -> Callable[..., dict[str, Any]]:
    """Build a JSON body for ``POST /posts``."""

    def _build(post_id: str = "p1", **overrides: Any) -> dict[str, Any]:
        payload = {
            "id": post_id,
            "timestamp": next(_TIMESTAMPS),
            "title": "Learn Redux in 10 minutes!",
            "body": "Just kidding. It takes more than 10 minutes to learn technology.",
            "author": "thingone",
            "category": "redux",
        }
        payload.update(overrides)
        return payload

    return _build


@pytest.fixture()
def comment_payload() -> Callable[..., dict[str, Any]]:
    """Build a JSON body for ``POST /comments``."""

    def _build(comment_id: str = "c1", parent_id: str = "p1", **overrides: Any) -> dict[str, Any]:
        payload = {
            "id": comment_id,
            "timestamp": next(_TIMESTAMPS),
            "body": "Comments. Are. Cool.",
            "author": "thingone",
            "parentId": parent_id,
        }
        payload.update(overrides)
        return payload

    return _build
