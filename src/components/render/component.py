"""
Render component - SSR head tags for listing pages.

Builds the paging link tags, page title and meta description for public
SSR pages.

Invariants:
- Link tag output is always canonical, next, prev in that order
- next/prev empty when there is only one page
- Malformed page indicators are reported, never defaulted
- Page titles come from the HasDisplayName capability
"""

from __future__ import annotations

from src.core.errors import InvalidArgumentError

from ._impl import (
    PagingLinkBuilder,
    create_meta_description,
    create_page_title,
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


def _convert_error(e: InvalidArgumentError) -> RenderValidationError:
    return RenderValidationError(
        code="invalid_argument",
        message=str(e),
        field=e.field,
    )


# --- Component Entry Points ---


def run_link_tags(
    inp: BuildLinkTagsInput,
    *,
    builder: PagingLinkBuilder | None = None,
) -> LinkTagsOutput:
    """
    Build paging link tags.

    Args:
        inp: Counts, listing URL and raw page indicator.
        builder: Optional configured builder (defaults to "?p=" routing).

    Returns:
        LinkTagsOutput with the tag set and its rendered HTML.
    """
    builder = builder or PagingLinkBuilder()

    try:
        tags = builder.link_tags(
            total_item_count=inp.total_item_count,
            page_size=inp.page_size,
            base_url=inp.base_url,
            raw_page=inp.page,
        )
    except InvalidArgumentError as e:
        return LinkTagsOutput(tags=None, errors=[_convert_error(e)], success=False)

    return LinkTagsOutput(tags=tags, html=tags.render())


def run_page_title(inp: PageTitleInput) -> PageTitleOutput:
    """Choose the page title for an entity page."""
    return PageTitleOutput(title=create_page_title(inp.entity, inp.fallback))


def run_meta_description(inp: MetaDescriptionInput) -> MetaDescriptionOutput:
    """Build the meta description."""
    if inp.max_length <= 0:
        return MetaDescriptionOutput(
            description="",
            errors=[
                RenderValidationError(
                    code="invalid_argument",
                    message=f"max_length must be positive, got {inp.max_length}",
                    field="max_length",
                )
            ],
            success=False,
        )
    return MetaDescriptionOutput(
        description=create_meta_description(inp.text, inp.max_length),
    )


def run(
    inp: BuildLinkTagsInput | PageTitleInput | MetaDescriptionInput,
    *,
    builder: PagingLinkBuilder | None = None,
) -> LinkTagsOutput | PageTitleOutput | MetaDescriptionOutput:
    """
    Main entry point for the render component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, BuildLinkTagsInput):
        return run_link_tags(inp, builder=builder)
    elif isinstance(inp, PageTitleInput):
        return run_page_title(inp)
    elif isinstance(inp, MetaDescriptionInput):
        return run_meta_description(inp)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
