"""
Render component port definitions.

The paging rules from rules.yaml (src.rules.models.PagingRules) satisfy
PagingRulesPort structurally.
"""

from __future__ import annotations

from typing import Protocol


class PagingRulesPort(Protocol):
    """Port for paging routing configuration."""

    query_param: str
    url_format: str
