"""
ImageUrlResolver - Display URLs for avatars and category images.

Stored files go through the injected storage backend; when nothing was
uploaded, avatars fall back to a Gravatar URL keyed on the member's email and
category images fall back to the configured default (or None).

Key behaviors:
- Size becomes a square crop query: ?width={n}&crop=0,0,{n},{n}
- Backend result returned verbatim, backend errors propagate
- No caching, no retries
"""

from __future__ import annotations

import hashlib
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import PurePosixPath
from urllib.parse import urlencode
from uuid import UUID

from src.core.errors import ConfigurationError, InvalidArgumentError
from src.core.ports.storage import FileUrlPort

from .ports import ImagesRulesPort

DEFAULT_IMAGE_EXTENSIONS = (".jpg", ".jpeg", ".gif", ".bmp", ".png")


# --- Configuration ---


@dataclass(frozen=True)
class ImageUrlConfig:
    """Image URL resolution configuration."""

    path_separator: str = "/"
    gravatar_base_url: str = "https://www.gravatar.com/avatar"
    gravatar_default: str = "identicon"
    gravatar_rating: str = "g"
    # May contain {size}; None means categories have no fallback image
    category_default_url: str | None = None
    badge_root: str = "/content/badges"
    image_extensions: tuple[str, ...] = field(default=DEFAULT_IMAGE_EXTENSIONS)

    @classmethod
    def from_rules(cls, rules: ImagesRulesPort) -> ImageUrlConfig:
        return cls(
            path_separator=rules.path_separator,
            gravatar_base_url=rules.gravatar.base_url,
            gravatar_default=rules.gravatar.default,
            gravatar_rating=rules.gravatar.rating,
            category_default_url=rules.category_default_url,
            badge_root=rules.badge_root,
            image_extensions=tuple(ext.lower() for ext in rules.image_extensions),
        )


DEFAULT_CONFIG = ImageUrlConfig()


# --- Helpers ---


def build_size_query(size: int) -> str:
    """Square crop query suffix for the storage backend."""
    if size <= 0:
        raise InvalidArgumentError(f"Image size must be positive, got {size}", field="size")
    return f"?width={size}&crop=0,0,{size},{size}"


def gravatar_url(
    identity_key: str,
    size: int,
    config: ImageUrlConfig = DEFAULT_CONFIG,
) -> str:
    """
    Gravatar URL for an email address.

    Gravatar hashes the trimmed, lowercased address with MD5.
    """
    if size <= 0:
        raise InvalidArgumentError(f"Image size must be positive, got {size}", field="size")

    digest = hashlib.md5(identity_key.strip().lower().encode("utf-8")).hexdigest()
    query = urlencode(
        {"s": size, "d": config.gravatar_default, "r": config.gravatar_rating}
    )
    return f"{config.gravatar_base_url.rstrip('/')}/{digest}?{query}"


def badge_url(badge_file: str, config: ImageUrlConfig = DEFAULT_CONFIG) -> str:
    """Public URL of a badge image."""
    return f"{config.badge_root.rstrip('/')}/{badge_file.lstrip('/')}"


def file_is_image(
    file_name: str,
    extensions: Sequence[str] = DEFAULT_IMAGE_EXTENSIONS,
) -> bool:
    """True when the file name ends in a known image extension."""
    suffix = PurePosixPath(file_name.strip()).suffix.lower()
    return bool(suffix) and suffix in {ext.lower() for ext in extensions}


# --- Resolver Service ---


class ImageUrlResolver:
    """
    Image URL resolver service.

    Holds a reference to the process-wide storage backend; stateless
    otherwise.
    """

    def __init__(
        self,
        storage: FileUrlPort | None,
        config: ImageUrlConfig | None = None,
    ) -> None:
        """Initialize resolver with a storage backend."""
        if storage is None:
            raise ConfigurationError("ImageUrlResolver requires a storage backend")
        self._storage = storage
        self._config = config or DEFAULT_CONFIG

    @property
    def config(self) -> ImageUrlConfig:
        return self._config

    def _stored_file_url(self, owner_id: UUID, file_name: str, size: int) -> str:
        return self._storage.build_file_url(
            owner_id,
            self._config.path_separator,
            file_name,
            build_size_query(size),
        )

    def resolve_avatar_url(
        self,
        stored_file_name: str | None,
        identity_key: str,
        owner_id: UUID,
        size: int,
    ) -> str:
        """
        Avatar URL for a member.

        Uploaded avatar when there is one, Gravatar otherwise. The fallback
        depends only on identity_key and size.
        """
        if stored_file_name and stored_file_name.strip():
            return self._stored_file_url(owner_id, stored_file_name, size)
        return gravatar_url(identity_key, size, self._config)

    def resolve_category_image_url(
        self,
        stored_file_name: str | None,
        owner_id: UUID,
        size: int,
    ) -> str | None:
        """
        Category image URL.

        Returns None when no image is stored and no default is configured.
        """
        # Validate size even when the backend is not called
        query = build_size_query(size)
        if stored_file_name and stored_file_name.strip():
            return self._storage.build_file_url(
                owner_id,
                self._config.path_separator,
                stored_file_name,
                query,
            )

        if self._config.category_default_url:
            return self._config.category_default_url.format(size=size)
        return None

    def badge_url(self, badge_file: str) -> str:
        return badge_url(badge_file, self._config)

    def is_image(self, file_name: str) -> bool:
        return file_is_image(file_name, self._config.image_extensions)


# --- Factory ---


def create_image_url_resolver(
    storage: FileUrlPort | None,
    rules: ImagesRulesPort | None = None,
) -> ImageUrlResolver:
    """Create an ImageUrlResolver from image rules (defaults when None)."""
    config = ImageUrlConfig.from_rules(rules) if rules is not None else None
    return ImageUrlResolver(storage=storage, config=config)
