"""
Render component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from src.domain.entities import HasDisplayName

from ._impl import LinkTagSet

# --- Validation Error ---


@dataclass(frozen=True)
class RenderValidationError:
    """Render validation error."""

    code: str
    message: str
    field: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class BuildLinkTagsInput:
    """Input for building paging link tags."""

    total_item_count: int
    page_size: int
    base_url: str
    # Raw value of the page query parameter, None when absent
    page: str | None = None


@dataclass(frozen=True)
class PageTitleInput:
    """Input for choosing a page title."""

    fallback: str
    entity: HasDisplayName | None = None


@dataclass(frozen=True)
class MetaDescriptionInput:
    """Input for building a meta description."""

    text: str | None
    max_length: int = 160


# --- Output Models ---


@dataclass(frozen=True)
class LinkTagsOutput:
    """Output containing paging link tags."""

    tags: LinkTagSet | None
    html: str = ""
    errors: list[RenderValidationError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class PageTitleOutput:
    """Output containing the page title."""

    title: str
    errors: list[RenderValidationError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class MetaDescriptionOutput:
    """Output containing the meta description."""

    description: str
    errors: list[RenderValidationError] = field(default_factory=list)
    success: bool = True
