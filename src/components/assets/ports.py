"""
Assets component port definitions.

The storage backend itself is src.core.ports.storage.FileUrlPort;
src.rules.models.ImagesRules satisfies ImagesRulesPort structurally.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from src.core.ports.storage import FileUrlPort


class GravatarRulesPort(Protocol):
    """Gravatar fallback settings."""

    base_url: str
    default: str
    rating: str


class ImagesRulesPort(Protocol):
    """Port for accessing image URL rules configuration."""

    path_separator: str
    category_default_url: str | None
    badge_root: str

    @property
    def gravatar(self) -> GravatarRulesPort: ...

    @property
    def image_extensions(self) -> Sequence[str]: ...


__all__ = ["FileUrlPort", "GravatarRulesPort", "ImagesRulesPort"]
