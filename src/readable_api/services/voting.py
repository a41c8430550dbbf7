"""Vote arithmetic shared by posts and comments."""

from __future__ import annotations

import logging
from typing import Protocol

from readable_api.core.errors import InvalidVoteOptionError
from readable_api.models import VoteOption

logger = logging.getLogger(__name__)


class Votable(Protocol):
    id: str
    vote_score: int


def apply_vote(record: Votable, option: object, *, strict: bool) -> bool:
    """Move ``record.vote_score`` by exactly one for a recognized option.

    Returns True when the score changed. Unrecognized options are logged and
    ignored, or raise ``InvalidVoteOptionError`` when ``strict`` is set; in
    both cases the record is left untouched.
    """
    parsed = VoteOption.parse(option)
    if parsed is None:
        if strict:
            raise InvalidVoteOptionError(option)
        logger.warning(
            "Ignoring unrecognized vote option %r for %s",
            option,
            record.id,
            extra={"option": option},
        )
        return False
    record.vote_score += parsed.delta
    return True
