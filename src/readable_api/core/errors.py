"""Store and tenant-resolution exceptions surfaced to the transport layer.

Every error is local to one operation: a store method that raises has not
mutated the tenant's dataset.
"""

from __future__ import annotations

from typing import Any

HTTP_BAD_REQUEST = 400
HTTP_FORBIDDEN = 403
HTTP_NOT_FOUND = 404
HTTP_CONFLICT = 409


class StoreError(RuntimeError):
    """Base exception raised for tenant store failures."""

    code = "STORE_ERROR"
    http_status = HTTP_BAD_REQUEST

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict[str, Any]:
        """Return the JSON body the API sends for this error."""
        return {"error": {"code": self.code, "message": self.message}}


class NotFoundError(StoreError, LookupError):
    """Raised when a post or comment id does not exist in the tenant."""

    code = "NOT_FOUND"
    http_status = HTTP_NOT_FOUND

    def __init__(self, kind: str, entity_id: str) -> None:
        super().__init__(f"{kind.capitalize()} not found: {entity_id}")
        self.kind = kind
        self.entity_id = entity_id


class DuplicateIdError(StoreError):
    """Raised when a create call reuses an id already present in the tenant."""

    code = "DUPLICATE_ID"
    http_status = HTTP_CONFLICT

    def __init__(self, kind: str, entity_id: str) -> None:
        super().__init__(f"{kind.capitalize()} already exists: {entity_id}")
        self.kind = kind
        self.entity_id = entity_id


class InvalidVoteOptionError(StoreError, ValueError):
    """Raised for an unrecognized vote option when strict voting is enabled."""

    code = "INVALID_VOTE_OPTION"
    http_status = HTTP_BAD_REQUEST

    def __init__(self, option: object) -> None:
        super().__init__(f"Invalid vote option: {option!r} (expected 'upVote' or 'downVote')")
        self.option = option


class MissingTokenError(StoreError):
    """Raised when a request carries no tenant token to select a dataset."""

    code = "MISSING_TOKEN"
    http_status = HTTP_FORBIDDEN

    def __init__(self) -> None:
        super().__init__(
            "Please provide an Authorization header to identify yourself "
            "(can be whatever you want)"
        )
