"""
Site component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

# --- Validation Error ---


@dataclass(frozen=True)
class SiteValidationError:
    """Site validation error."""

    code: str
    message: str
    field: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class StaticResourceInput:
    """Input for classifying a request path."""

    path: str | None


@dataclass(frozen=True)
class CategoryRssUrlInput:
    """Input for building a category feed URL."""

    slug: str


@dataclass(frozen=True)
class ThemeFoldersInput:
    """Input for listing installed themes (None means the configured root)."""

    theme_root: str | None = None


# --- Output Models ---


@dataclass(frozen=True)
class StaticResourceOutput:
    is_static: bool
    errors: list[SiteValidationError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class CategoryRssUrlOutput:
    url: str | None
    errors: list[SiteValidationError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class ThemeFoldersOutput:
    folders: list[str] = field(default_factory=list)
    success: bool = True
