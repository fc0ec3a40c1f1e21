"""
Site helpers - request classification, theme discovery, feed URLs.

Functional core for the small routing-level questions a page layer asks:
is this request a static file, which themes are installed, where does a
category feed live.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from urllib.parse import urlparse

from src.core.errors import ConfigurationError, InvalidArgumentError

from .ports import SiteRulesPort

logger = logging.getLogger(__name__)

DEFAULT_STATIC_EXTENSIONS = frozenset(
    {
        ".axd",
        ".ashx",
        ".bmp",
        ".css",
        ".gif",
        ".htm",
        ".html",
        ".ico",
        ".jpeg",
        ".jpg",
        ".js",
        ".png",
        ".rar",
        ".zip",
    }
)

# Theme folders whose name contains this are shared bases, not selectable themes
BASE_THEME_MARKER = "base"


def is_static_resource(
    path: str | None,
    extensions: Iterable[str] = DEFAULT_STATIC_EXTENSIONS,
) -> bool:
    """
    True if the request path targets a static resource file.

    Query strings and fragments are ignored; matching is case-insensitive.
    """
    if path is None:
        raise InvalidArgumentError("Request path is required", field="path")

    suffix = PurePosixPath(urlparse(path).path).suffix.lower()
    if not suffix:
        return False

    return suffix in {ext.lower() for ext in extensions}


def get_theme_folders(theme_root: str | Path) -> list[str]:
    """
    Names of the installed theme folders, sorted.

    Raises ConfigurationError when the theme root does not exist.
    """
    root = Path(theme_root)
    if not root.is_dir():
        raise ConfigurationError(f"Theme folder not found: {root}")

    folders = sorted(
        child.name
        for child in root.iterdir()
        if child.is_dir() and BASE_THEME_MARKER not in child.name.lower()
    )
    logger.debug("Found %d theme folders in %s", len(folders), root)
    return folders


def category_rss_url(slug: str, identifier: str = "category") -> str:
    """Site-relative RSS feed URL for a category."""
    if not slug or not slug.strip():
        raise InvalidArgumentError("Category slug is required", field="slug")
    return f"/{identifier.strip('/')}/rss/{slug.strip()}"


# --- Configuration ---


@dataclass(frozen=True)
class SiteConfig:
    """Site routing configuration."""

    theme_root: str = "themes"
    category_url_identifier: str = "category"
    static_extensions: frozenset[str] = DEFAULT_STATIC_EXTENSIONS

    @classmethod
    def from_rules(cls, rules: SiteRulesPort) -> SiteConfig:
        return cls(
            theme_root=rules.theme_root,
            category_url_identifier=rules.category_url_identifier,
            static_extensions=frozenset(ext.lower() for ext in rules.static_extensions),
        )


# --- Site Service ---


class SiteHelpers:
    """
    Site helper service.

    Binds the routing-level helpers to one site configuration.
    """

    def __init__(self, config: SiteConfig | None = None) -> None:
        self._config = config or SiteConfig()

    @property
    def config(self) -> SiteConfig:
        return self._config

    def is_static_resource(self, path: str | None) -> bool:
        return is_static_resource(path, self._config.static_extensions)

    def theme_folders(self, theme_root: str | Path | None = None) -> list[str]:
        """Installed themes under theme_root, or the configured root."""
        return get_theme_folders(theme_root or self._config.theme_root)

    def category_rss_url(self, slug: str) -> str:
        return category_rss_url(slug, self._config.category_url_identifier)


def create_site_helpers(rules: SiteRulesPort | None = None) -> SiteHelpers:
    """Create SiteHelpers from site rules (defaults when None)."""
    config = SiteConfig.from_rules(rules) if rules is not None else None
    return SiteHelpers(config)
