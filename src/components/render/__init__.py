"""
Render component - SSR head tags (paging links, titles, descriptions).
"""

from ._impl import (
    DEFAULT_PAGING_URL_FORMAT,
    DEFAULT_QUERY_PARAM,
    LinkTagSet,
    PageContext,
    PagingLinkBuilder,
    PagingUrlFormat,
    build_link_tags,
    create_meta_description,
    create_page_title,
    create_paging_link_builder,
    format_paging_url,
    paging_url_formatter,
    parse_page_number,
    truncate_description,
)
from .component import (
    run,
    run_link_tags,
    run_meta_description,
    run_page_title,
)
from .models import (
    BuildLinkTagsInput,
    LinkTagsOutput,
    MetaDescriptionInput,
    MetaDescriptionOutput,
    PageTitleInput,
    PageTitleOutput,
    RenderValidationError,
)
from .ports import PagingRulesPort

__all__ = [
    # Entry points
    "run",
    "run_link_tags",
    "run_meta_description",
    "run_page_title",
    # Input models
    "BuildLinkTagsInput",
    "MetaDescriptionInput",
    "PageTitleInput",
    # Output models
    "LinkTagsOutput",
    "MetaDescriptionOutput",
    "PageTitleOutput",
    "RenderValidationError",
    # Ports
    "PagingRulesPort",
    # Core
    "DEFAULT_PAGING_URL_FORMAT",
    "DEFAULT_QUERY_PARAM",
    "LinkTagSet",
    "PageContext",
    "PagingLinkBuilder",
    "PagingUrlFormat",
    "build_link_tags",
    "create_meta_description",
    "create_page_title",
    "create_paging_link_builder",
    "format_paging_url",
    "paging_url_formatter",
    "parse_page_number",
    "truncate_description",
]
