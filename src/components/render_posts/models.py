"""
Render posts component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

# --- Validation Error ---


@dataclass(frozen=True)
class RenderPostsValidationError:
    """Render posts validation error."""

    code: str
    message: str
    field: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class RenderPostInput:
    """Input for rendering raw post markup to HTML."""

    raw: str


# --- Output Models ---


@dataclass(frozen=True)
class RenderPostOutput:
    """Output containing rendered HTML."""

    html: str
    errors: list[RenderPostsValidationError] = field(default_factory=list)
    success: bool = True
