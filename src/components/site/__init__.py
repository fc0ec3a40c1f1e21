"""
Site component - Static resource detection, theme folders, feed URLs.
"""

from ._impl import (
    BASE_THEME_MARKER,
    DEFAULT_STATIC_EXTENSIONS,
    SiteConfig,
    SiteHelpers,
    category_rss_url,
    create_site_helpers,
    get_theme_folders,
    is_static_resource,
)
from .component import (
    run,
    run_category_rss_url,
    run_static_resource,
    run_theme_folders,
)
from .models import (
    CategoryRssUrlInput,
    CategoryRssUrlOutput,
    SiteValidationError,
    StaticResourceInput,
    StaticResourceOutput,
    ThemeFoldersInput,
    ThemeFoldersOutput,
)
from .ports import SiteRulesPort

__all__ = [
    # Entry points
    "run",
    "run_category_rss_url",
    "run_static_resource",
    "run_theme_folders",
    # Input models
    "CategoryRssUrlInput",
    "StaticResourceInput",
    "ThemeFoldersInput",
    # Output models
    "CategoryRssUrlOutput",
    "SiteValidationError",
    "StaticResourceOutput",
    "ThemeFoldersOutput",
    # Ports
    "SiteRulesPort",
    # Core
    "BASE_THEME_MARKER",
    "DEFAULT_STATIC_EXTENSIONS",
    "SiteConfig",
    "SiteHelpers",
    "category_rss_url",
    "create_site_helpers",
    "get_theme_folders",
    "is_static_resource",
]
