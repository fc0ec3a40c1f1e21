"""
Assets component - Avatar and category image URLs.

Invariants:
- A stored file name always resolves through the storage backend
- Avatar fallback depends only on identity key and size
- Category fallback is the configured default or None, never a guess
- Backend errors propagate unchanged
"""

from __future__ import annotations

from src.core.errors import InvalidArgumentError

from ._impl import ImageUrlResolver
from .models import (
    AssetValidationError,
    AvatarUrlInput,
    CategoryImageUrlInput,
    ImageUrlOutput,
)


def _error_output(e: InvalidArgumentError) -> ImageUrlOutput:
    return ImageUrlOutput(
        url=None,
        errors=[AssetValidationError(code="invalid_argument", message=str(e), field=e.field)],
        success=False,
    )


# --- Component Entry Points ---


def run_avatar_url(
    inp: AvatarUrlInput,
    resolver: ImageUrlResolver,
) -> ImageUrlOutput:
    """Resolve a member avatar URL."""
    try:
        url = resolver.resolve_avatar_url(
            inp.stored_file_name,
            inp.identity_key,
            inp.owner_id,
            inp.size,
        )
    except InvalidArgumentError as e:
        return _error_output(e)

    return ImageUrlOutput(url=url)


def run_category_image_url(
    inp: CategoryImageUrlInput,
    resolver: ImageUrlResolver,
) -> ImageUrlOutput:
    """Resolve a category image URL."""
    try:
        url = resolver.resolve_category_image_url(
            inp.stored_file_name,
            inp.owner_id,
            inp.size,
        )
    except InvalidArgumentError as e:
        return _error_output(e)

    return ImageUrlOutput(url=url)


def run(
    inp: AvatarUrlInput | CategoryImageUrlInput,
    resolver: ImageUrlResolver,
) -> ImageUrlOutput:
    """
    Main entry point for the assets component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, AvatarUrlInput):
        return run_avatar_url(inp, resolver)
    elif isinstance(inp, CategoryImageUrlInput):
        return run_category_image_url(inp, resolver)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
