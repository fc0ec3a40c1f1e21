"""
Render posts component - Render user markup to HTML.

Invariants:
- Transforms run in the configured order
- Blank input is returned unchanged
- A broken transform raises ConfigurationError (never converted to errors)
- Re-rendering does not duplicate code block classes
"""

from __future__ import annotations

from ._impl import PostRenderer, create_post_renderer
from .models import (
    RenderPostInput,
    RenderPostOutput,
    RenderPostsValidationError,
)
from .ports import RenderRulesPort

# --- Component Entry Points ---


def run_render(
    inp: RenderPostInput,
    *,
    renderer: PostRenderer | None = None,
    rules: RenderRulesPort | None = None,
) -> RenderPostOutput:
    """
    Render post markup to HTML.

    Args:
        inp: Input containing raw post markup.
        renderer: Optional pre-built renderer (shared per process).
        rules: Optional render rules, used when no renderer is given.

    Returns:
        RenderPostOutput with rendered HTML.
    """
    if not isinstance(inp.raw, str):
        return RenderPostOutput(
            html="",
            errors=[
                RenderPostsValidationError(
                    code="invalid_argument",
                    message=f"Post content must be a string, got {type(inp.raw).__name__}",
                    field="raw",
                )
            ],
            success=False,
        )

    renderer = renderer or create_post_renderer(rules)
    return RenderPostOutput(html=renderer.render(inp.raw))


def run(
    inp: RenderPostInput,
    *,
    renderer: PostRenderer | None = None,
    rules: RenderRulesPort | None = None,
) -> RenderPostOutput:
    """
    Main entry point for the render posts component.
    """
    if isinstance(inp, RenderPostInput):
        return run_render(inp, renderer=renderer, rules=rules)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
