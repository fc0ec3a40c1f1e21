"""
Render posts component port definitions.

src.rules.models.RenderRules satisfies RenderRulesPort structurally.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol


class VideoProviderRulePort(Protocol):
    """Configured video provider."""

    name: str
    pattern: str
    embed_url: str


class RenderRulesPort(Protocol):
    """Port for accessing render rules configuration."""

    code_block_class: str
    markdown_extensions: list[str]
    video_width: int
    video_height: int

    @property
    def video_providers(self) -> Sequence[VideoProviderRulePort]:
        """Configured providers; empty means the built-in ones."""
        ...
