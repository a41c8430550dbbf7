"""Category records."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Category:
    """A named bucket posts are filed under; ``path`` is what posts reference."""

    name: str
    path: str
