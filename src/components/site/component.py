"""
Site component - Static resource detection, theme folders, feed URLs.

Invariants:
- Static detection uses the configured extension list, case-insensitive
- Feed URLs use the configured category URL identifier
- A missing theme root raises ConfigurationError (never converted to errors)
"""

from __future__ import annotations

from src.core.errors import InvalidArgumentError

from ._impl import SiteHelpers
from .models import (
    CategoryRssUrlInput,
    CategoryRssUrlOutput,
    SiteValidationError,
    StaticResourceInput,
    StaticResourceOutput,
    ThemeFoldersInput,
    ThemeFoldersOutput,
)


def _convert_error(e: InvalidArgumentError) -> SiteValidationError:
    return SiteValidationError(code="invalid_argument", message=str(e), field=e.field)


# --- Component Entry Points ---


def run_static_resource(
    inp: StaticResourceInput,
    *,
    helpers: SiteHelpers | None = None,
) -> StaticResourceOutput:
    """Classify a request path as static resource or page."""
    helpers = helpers or SiteHelpers()
    try:
        return StaticResourceOutput(is_static=helpers.is_static_resource(inp.path))
    except InvalidArgumentError as e:
        return StaticResourceOutput(is_static=False, errors=[_convert_error(e)], success=False)


def run_category_rss_url(
    inp: CategoryRssUrlInput,
    *,
    helpers: SiteHelpers | None = None,
) -> CategoryRssUrlOutput:
    """Build the RSS feed URL of a category."""
    helpers = helpers or SiteHelpers()
    try:
        return CategoryRssUrlOutput(url=helpers.category_rss_url(inp.slug))
    except InvalidArgumentError as e:
        return CategoryRssUrlOutput(url=None, errors=[_convert_error(e)], success=False)


def run_theme_folders(
    inp: ThemeFoldersInput,
    *,
    helpers: SiteHelpers | None = None,
) -> ThemeFoldersOutput:
    """List installed theme folders."""
    helpers = helpers or SiteHelpers()
    return ThemeFoldersOutput(folders=helpers.theme_folders(inp.theme_root))


def run(
    inp: StaticResourceInput | CategoryRssUrlInput | ThemeFoldersInput,
    *,
    helpers: SiteHelpers | None = None,
) -> StaticResourceOutput | CategoryRssUrlOutput | ThemeFoldersOutput:
    """
    Main entry point for the site component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, StaticResourceInput):
        return run_static_resource(inp, helpers=helpers)
    elif isinstance(inp, CategoryRssUrlInput):
        return run_category_rss_url(inp, helpers=helpers)
    elif isinstance(inp, ThemeFoldersInput):
        return run_theme_folders(inp, helpers=helpers)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
