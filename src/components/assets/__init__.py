"""
Assets component - Avatar, category image and badge URLs.
"""

from ._impl import (
    DEFAULT_IMAGE_EXTENSIONS,
    ImageUrlConfig,
    ImageUrlResolver,
    badge_url,
    build_size_query,
    create_image_url_resolver,
    file_is_image,
    gravatar_url,
)
from .component import (
    run,
    run_avatar_url,
    run_category_image_url,
)
from .models import (
    AssetValidationError,
    AvatarUrlInput,
    CategoryImageUrlInput,
    ImageUrlOutput,
)
from .ports import FileUrlPort, GravatarRulesPort, ImagesRulesPort

__all__ = [
    # Entry points
    "run",
    "run_avatar_url",
    "run_category_image_url",
    # Input models
    "AvatarUrlInput",
    "CategoryImageUrlInput",
    # Output models
    "AssetValidationError",
    "ImageUrlOutput",
    # Ports
    "FileUrlPort",
    "GravatarRulesPort",
    "ImagesRulesPort",
    # Core
    "DEFAULT_IMAGE_EXTENSIONS",
    "ImageUrlConfig",
    "ImageUrlResolver",
    "badge_url",
    "build_size_query",
    "create_image_url_resolver",
    "file_is_image",
    "gravatar_url",
]
