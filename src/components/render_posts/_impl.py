"""
PostRenderer - Render user-authored post markup to HTML.

Applies an explicit, ordered tuple of string transforms:

1. Markdown to HTML (Python-Markdown)
2. Video embeds (bare provider URLs become player iframes)
3. Code block class (every bare <pre> gets the highlighting class)

Order matters: embeds run after markdown so the iframe markup is not escaped,
and the code block class runs last so nothing upstream rewrites it.

Key behaviors:
- Empty or whitespace-only input is returned unchanged
- A failing transform is a configuration error, not a per-post error
- Code block annotation is idempotent (only bare <pre> is rewritten)
- No sanitization: output is only as safe as the transforms make it
"""

from __future__ import annotations

import html
import logging
import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from functools import lru_cache

import markdown

from src.core.errors import ConfigurationError

from .ports import RenderRulesPort

logger = logging.getLogger(__name__)

Transform = Callable[[str], str]

DEFAULT_CODE_BLOCK_CLASS = "prettyprint"
DEFAULT_VIDEO_WIDTH = 560
DEFAULT_VIDEO_HEIGHT = 315


# --- Video Providers ---


@dataclass(frozen=True)
class VideoProvider:
    """Known video host: URL pattern with an ``id`` group and a player URL."""

    name: str
    pattern: str
    embed_url: str

    def compile(self) -> re.Pattern[str]:
        try:
            compiled = re.compile(self.pattern, re.IGNORECASE)
        except re.error as e:
            raise ConfigurationError(f"Invalid pattern for video provider {self.name}: {e}") from e
        if "id" not in compiled.groupindex:
            raise ConfigurationError(f"Video provider {self.name} pattern has no 'id' group")
        return compiled


# Trailing [^\s<"']* swallows the rest of the URL (timestamps, playlists)
DEFAULT_VIDEO_PROVIDERS: tuple[VideoProvider, ...] = (
    VideoProvider(
        name="youtube",
        pattern=(
            r"https?://(?:www\.|m\.)?"
            r"(?:youtube\.com/watch\?(?:[^\s<\"']*?&(?:amp;)?)?v=|youtu\.be/)"
            r"(?P<id>[\w-]{11})[^\s<\"']*"
        ),
        embed_url="https://www.youtube.com/embed/{id}",
    ),
    VideoProvider(
        name="vimeo",
        pattern=r"https?://(?:www\.)?vimeo\.com/(?P<id>\d+)[^\s<\"']*",
        embed_url="https://player.vimeo.com/video/{id}",
    ),
    VideoProvider(
        name="dailymotion",
        pattern=r"https?://(?:www\.)?dailymotion\.com/video/(?P<id>[a-z0-9]+)[^\s<\"']*",
        embed_url="https://www.dailymotion.com/embed/video/{id}",
    ),
)


# --- Transforms ---


class MarkdownTransform:
    """Markdown to HTML via Python-Markdown."""

    def __init__(self, extensions: Sequence[str] = ()) -> None:
        self._extensions = list(extensions)
        # Unknown extensions fail here, at construction, not on the first post
        try:
            markdown.Markdown(extensions=self._extensions)
        except ImportError as e:
            raise ConfigurationError(f"Unknown markdown extension: {e}") from e

    def __call__(self, text: str) -> str:
        return markdown.markdown(text, extensions=self._extensions)


_TAG_RE = re.compile(r"(<[^>]*>)")
_TAG_NAME_RE = re.compile(r"<\s*(/?)\s*([a-z0-9]+)", re.IGNORECASE)

# URLs inside these elements are left alone
_NO_EMBED_TAGS = frozenset({"a", "pre", "code"})


class VideoEmbedTransform:
    """
    Replace bare video URLs in HTML text with player iframes.

    Only text between tags is scanned, so URLs in attribute values and
    inside links or code are kept as written.
    """

    def __init__(
        self,
        providers: Sequence[VideoProvider] = DEFAULT_VIDEO_PROVIDERS,
        width: int = DEFAULT_VIDEO_WIDTH,
        height: int = DEFAULT_VIDEO_HEIGHT,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ConfigurationError(f"Invalid video size {width}x{height}")
        self._providers = [(p, p.compile()) for p in providers]
        self._width = width
        self._height = height

    def __call__(self, text: str) -> str:
        parts = _TAG_RE.split(text)
        skip_depth = 0

        # re.split with a group alternates text, tag, text, ...
        for i, part in enumerate(parts):
            if i % 2 == 1:
                match = _TAG_NAME_RE.match(part)
                if match and match.group(2).lower() in _NO_EMBED_TAGS:
                    if match.group(1):
                        skip_depth = max(0, skip_depth - 1)
                    elif not part.rstrip(">").endswith("/"):
                        skip_depth += 1
                continue
            if part and skip_depth == 0:
                parts[i] = self._embed(part)

        return "".join(parts)

    def _embed(self, text: str) -> str:
        for provider, compiled in self._providers:
            text = compiled.sub(lambda m, p=provider: self._player(p, m.group("id")), text)
        return text

    def _player(self, provider: VideoProvider, video_id: str) -> str:
        src = html.escape(provider.embed_url.format(id=video_id), quote=True)
        return (
            f'<iframe class="video-embed video-{provider.name}" '
            f'width="{self._width}" height="{self._height}" src="{src}" '
            f'frameborder="0" allowfullscreen></iframe>'
        )


class CodeBlockTransform:
    """Add the syntax-highlighting class to every bare <pre> tag."""

    def __init__(self, css_class: str = DEFAULT_CODE_BLOCK_CLASS) -> None:
        if not css_class.strip():
            raise ConfigurationError("Code block class must not be empty")
        self._replacement = f'<pre class="{html.escape(css_class.strip(), quote=True)}">'

    def __call__(self, text: str) -> str:
        return text.replace("<pre>", self._replacement)


# --- Post Renderer Service ---


def _transform_name(transform: Transform) -> str:
    return getattr(transform, "__name__", type(transform).__name__)


class PostRenderer:
    """
    Post renderer service.

    Runs the configured transforms in order over raw post markup.
    """

    def __init__(self, transforms: Sequence[Transform]) -> None:
        """Initialize renderer with an ordered, non-empty transform sequence."""
        if not transforms:
            raise ConfigurationError("PostRenderer needs at least one transform")
        for transform in transforms:
            if not callable(transform):
                raise ConfigurationError(f"Transform {transform!r} is not callable")
        self._transforms: tuple[Transform, ...] = tuple(transforms)

    @property
    def transforms(self) -> tuple[Transform, ...]:
        return self._transforms

    def render(self, raw: str) -> str:
        """Render raw post markup to HTML."""
        if not raw or not raw.strip():
            return raw

        text = raw
        for transform in self._transforms:
            name = _transform_name(transform)
            try:
                text = transform(text)
            except Exception as e:
                logger.error("Content transform %s failed", name, exc_info=True)
                raise ConfigurationError(f"Content transform {name} failed: {e}") from e
            if not isinstance(text, str):
                raise ConfigurationError(
                    f"Content transform {name} returned {type(text).__name__}, expected str"
                )

        return text


# --- Factory ---


def default_transforms(rules: RenderRulesPort | None = None) -> tuple[Transform, ...]:
    """Markdown, video embeds, code block class - in that order."""
    if rules is None:
        return (MarkdownTransform(), VideoEmbedTransform(), CodeBlockTransform())

    providers: Sequence[VideoProvider] = DEFAULT_VIDEO_PROVIDERS
    if rules.video_providers:
        providers = [
            VideoProvider(name=p.name, pattern=p.pattern, embed_url=p.embed_url)
            for p in rules.video_providers
        ]

    return (
        MarkdownTransform(rules.markdown_extensions),
        VideoEmbedTransform(providers, rules.video_width, rules.video_height),
        CodeBlockTransform(rules.code_block_class),
    )


def create_post_renderer(rules: RenderRulesPort | None = None) -> PostRenderer:
    """Create a PostRenderer with the default pipeline."""
    return PostRenderer(default_transforms(rules))


@lru_cache(maxsize=1)
def _default_renderer() -> PostRenderer:
    return create_post_renderer()


def convert_post_content(raw: str) -> str:
    """Render post content with the default pipeline."""
    return _default_renderer().render(raw)
