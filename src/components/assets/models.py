"""
Assets component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from uuid import UUID

# --- Validation Error ---


@dataclass(frozen=True)
class AssetValidationError:
    """Asset validation error."""

    code: str
    message: str
    field: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class AvatarUrlInput:
    """Input for resolving a member avatar URL."""

    owner_id: UUID
    identity_key: str
    size: int
    stored_file_name: str = ""


@dataclass(frozen=True)
class CategoryImageUrlInput:
    """Input for resolving a category image URL."""

    owner_id: UUID
    size: int
    stored_file_name: str = ""


# --- Output Models ---


@dataclass(frozen=True)
class ImageUrlOutput:
    """Output containing a resolved image URL (None when there is no image)."""

    url: str | None
    errors: list[AssetValidationError] = field(default_factory=list)
    success: bool = True
