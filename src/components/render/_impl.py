"""
PagingLinkBuilder - SEO link tags for paged listings.

Builds the canonical / next / prev <link> tags for the current page of a
listing, plus the page title and meta description used in the same <head>.

Key behaviors:
- Page indicator read from a single query parameter ("p" by default)
- Absent indicator means page 1; malformed indicator is an error
- Canonical points at the bare listing URL on the first page
- Exactly one of four next/prev cases applies
- Output is always three lines (canonical, next, prev), empty when absent
- Pure functions: same inputs always produce same outputs
"""

from __future__ import annotations

import html
import math
import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass

from src.core.errors import ConfigurationError, InvalidArgumentError
from src.domain.entities import HasDisplayName

from .ports import PagingRulesPort

PagingUrlFormat = Callable[[str, int], str]

DEFAULT_QUERY_PARAM = "p"

DEFAULT_PAGING_URL_FORMAT = "{url}?p={page}"

# Optional sign, ASCII digits only
_PAGE_NUMBER_RE = re.compile(r"[+-]?[0-9]+")

CANONICAL_TAG = '<link href="{0}" rel="canonical" />'
NEXT_TAG = '<link href="{0}" rel="next" />'
PREV_TAG = '<link href="{0}" rel="prev" />'


# --- Page Context ---


@dataclass(frozen=True)
class PageContext:
    """
    Paging state of the listing being rendered.

    current_page values below 1 are treated as the first page.
    """

    total_item_count: int
    page_size: int
    base_url: str
    current_page: int = 1

    def __post_init__(self) -> None:
        if self.page_size <= 0:
            raise InvalidArgumentError(
                f"page_size must be positive, got {self.page_size}", field="page_size"
            )
        if self.total_item_count < 0:
            raise InvalidArgumentError(
                f"total_item_count must not be negative, got {self.total_item_count}",
                field="total_item_count",
            )

    @property
    def page_count(self) -> int:
        """Number of pages, never less than 1."""
        return max(1, math.ceil(self.total_item_count / self.page_size))


@dataclass(frozen=True)
class LinkTagSet:
    """Canonical, next and prev tags. Absent tags are empty strings."""

    canonical: str
    next: str = ""
    prev: str = ""

    def lines(self) -> tuple[str, str, str]:
        return (self.canonical, self.next, self.prev)

    def render(self) -> str:
        """Three lines in fixed order, empty lines kept."""
        return "\n".join(self.lines())


# --- URL Templates ---


def paging_url_formatter(template: str) -> PagingUrlFormat:
    """
    Turn a format string into a paging URL function.

    The template receives ``url`` and ``page`` keywords.
    """
    try:
        template.format(url="", page=2)
    except (KeyError, IndexError, ValueError) as e:
        raise ConfigurationError(f"Invalid paging url format {template!r}: {e}") from e
    if "{page" not in template:
        raise ConfigurationError(f"Paging url format {template!r} does not use {{page}}")

    def _format(url: str, page: int) -> str:
        return template.format(url=url, page=page)

    return _format


format_paging_url = paging_url_formatter(DEFAULT_PAGING_URL_FORMAT)


# --- Page Indicator ---


def parse_page_number(raw: str | None) -> int:
    """
    Parse the current page indicator.

    Absent or blank means the first page. Anything non-numeric is reported
    rather than defaulted.
    """
    if raw is None or not raw.strip():
        return 1

    value = raw.strip()
    if not _PAGE_NUMBER_RE.fullmatch(value):
        raise InvalidArgumentError(f"Invalid page number: {raw!r}", field="page")
    return int(value)


# --- Link Tags ---


def _tag(template: str, url: str) -> str:
    return template.format(html.escape(url, quote=True))


def build_link_tags(
    ctx: PageContext,
    url_format: PagingUrlFormat = format_paging_url,
) -> LinkTagSet:
    """
    Build the SEO link tags for the current page.

    Cases, with page_count > 1:
    1. first page: next only (page 2)
    2. middle page: next and prev
    3. last page: prev only
    Otherwise neither.
    """
    page = ctx.current_page
    page_count = ctx.page_count

    canonical_url = ctx.base_url if page <= 1 else url_format(ctx.base_url, page)
    next_tag = ""
    prev_tag = ""

    if page_count > 1:
        if page <= 1:
            next_tag = _tag(NEXT_TAG, url_format(ctx.base_url, 2))
        elif page < page_count:
            next_tag = _tag(NEXT_TAG, url_format(ctx.base_url, page + 1))
            prev_tag = _tag(PREV_TAG, url_format(ctx.base_url, page - 1))
        elif page == page_count:
            prev_tag = _tag(PREV_TAG, url_format(ctx.base_url, page - 1))

    return LinkTagSet(
        canonical=_tag(CANONICAL_TAG, canonical_url),
        next=next_tag,
        prev=prev_tag,
    )


class PagingLinkBuilder:
    """
    Paging link tag service.

    Holds the routing-specific pieces (query parameter name, URL template)
    so page-rendering code only supplies counts and the listing URL.
    """

    def __init__(
        self,
        url_format: PagingUrlFormat | str = DEFAULT_PAGING_URL_FORMAT,
        query_param: str = DEFAULT_QUERY_PARAM,
    ) -> None:
        if isinstance(url_format, str):
            url_format = paging_url_formatter(url_format)
        self._url_format = url_format
        self._query_param = query_param

    @property
    def query_param(self) -> str:
        return self._query_param

    def read_page(self, params: Mapping[str, str]) -> int:
        """Read the current page from request query parameters."""
        return parse_page_number(params.get(self._query_param))

    def page_url(self, base_url: str, page: int) -> str:
        """URL of a given page of the listing."""
        if page <= 1:
            return base_url
        return self._url_format(base_url, page)

    def link_tags(
        self,
        total_item_count: int,
        page_size: int,
        base_url: str,
        raw_page: str | None = None,
    ) -> LinkTagSet:
        ctx = PageContext(
            total_item_count=total_item_count,
            page_size=page_size,
            base_url=base_url,
            current_page=parse_page_number(raw_page),
        )
        return build_link_tags(ctx, self._url_format)


def create_paging_link_builder(rules: PagingRulesPort | None = None) -> PagingLinkBuilder:
    """Create a PagingLinkBuilder from paging rules (defaults when None)."""
    if rules is None:
        return PagingLinkBuilder()
    return PagingLinkBuilder(url_format=rules.url_format, query_param=rules.query_param)


# --- Titles & Descriptions ---


def create_page_title(entity: HasDisplayName | None, fallback: str) -> str:
    """Page title from the entity's display name, else the fallback."""
    if entity is not None and entity.display_name.strip():
        return entity.display_name
    return fallback


def truncate_description(text: str, max_length: int = 160) -> str:
    """
    Truncate description to fit meta description limits.

    Breaks at word boundary if possible.
    """
    if len(text) <= max_length:
        return text

    # Find last space before limit
    truncated = text[:max_length]
    last_space = truncated.rfind(" ")

    if last_space > max_length * 0.6:  # At least 60% of the text
        truncated = truncated[:last_space]

    return truncated.rstrip() + "..."


def create_meta_description(text: str | None, max_length: int = 160) -> str:
    """Meta description from free text; empty when there is nothing to say."""
    if not text:
        return ""
    collapsed = " ".join(text.split())
    return truncate_description(collapsed, max_length)
