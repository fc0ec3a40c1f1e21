"""
Site component port definitions.

src.rules.models.SiteRules satisfies SiteRulesPort structurally.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol


class SiteRulesPort(Protocol):
    """Port for accessing site rules configuration."""

    theme_root: str
    category_url_identifier: str

    @property
    def static_extensions(self) -> Sequence[str]: ...
