"""
Render posts component - Render user markup to HTML.
"""

from ._impl import (
    DEFAULT_CODE_BLOCK_CLASS,
    DEFAULT_VIDEO_PROVIDERS,
    CodeBlockTransform,
    MarkdownTransform,
    PostRenderer,
    Transform,
    VideoEmbedTransform,
    VideoProvider,
    convert_post_content,
    create_post_renderer,
    default_transforms,
)
from .component import (
    run,
    run_render,
)
from .models import (
    RenderPostInput,
    RenderPostOutput,
    RenderPostsValidationError,
)
from .ports import RenderRulesPort, VideoProviderRulePort

__all__ = [
    # Entry points
    "run",
    "run_render",
    # Input models
    "RenderPostInput",
    # Output models
    "RenderPostOutput",
    "RenderPostsValidationError",
    # Ports
    "RenderRulesPort",
    "VideoProviderRulePort",
    # Core
    "DEFAULT_CODE_BLOCK_CLASS",
    "DEFAULT_VIDEO_PROVIDERS",
    "CodeBlockTransform",
    "MarkdownTransform",
    "PostRenderer",
    "Transform",
    "VideoEmbedTransform",
    "VideoProvider",
    "convert_post_content",
    "create_post_renderer",
    "default_transforms",
]
