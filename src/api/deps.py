import logging
import os
from functools import lru_cache
from pathlib import Path

from fastapi import Depends, HTTPException, Request, status

from src.adapters.local_storage import LocalFileStorage

# Components are stateless, so one instance of each is shared per process.
# Dependencies are injected as ports/adapters.
from src.components.assets import ImageUrlResolver, create_image_url_resolver
from src.components.render import PagingLinkBuilder, create_paging_link_builder
from src.components.render_posts import PostRenderer, create_post_renderer
from src.components.site import SiteHelpers, create_site_helpers
from src.core.errors import InvalidArgumentError
from src.rules.loader import load_rules
from src.rules.models import Rules

logger = logging.getLogger(__name__)


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.rules_path = Path(
            os.environ.get("FORUMKIT_RULES_PATH", str(self.base_dir / "rules.yaml"))
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
@lru_cache
def get_rules(settings: Settings = Depends(get_settings)) -> Rules:
    if not settings.rules_path.exists():
        logger.warning("Rules file %s not found, using defaults", settings.rules_path)
        return Rules()
    return load_rules(settings.rules_path)


# --- Adapters ---
@lru_cache
def get_storage(settings: Settings = Depends(get_settings)) -> LocalFileStorage:
    rules = get_rules(settings)
    return LocalFileStorage(
        rules.storage.base_path,
        public_prefix=rules.storage.public_prefix,
    )


# --- Component Services ---
@lru_cache
def get_image_resolver(settings: Settings = Depends(get_settings)) -> ImageUrlResolver:
    """Get image URL resolver bound to the process storage backend."""
    return create_image_url_resolver(get_storage(settings), get_rules(settings).images)


@lru_cache
def get_post_renderer(settings: Settings = Depends(get_settings)) -> PostRenderer:
    """Get post renderer with the configured pipeline."""
    return create_post_renderer(get_rules(settings).render)


@lru_cache
def get_paging_link_builder(settings: Settings = Depends(get_settings)) -> PagingLinkBuilder:
    """Get paging link builder with the configured routing scheme."""
    return create_paging_link_builder(get_rules(settings).paging)


@lru_cache
def get_site_helpers(settings: Settings = Depends(get_settings)) -> SiteHelpers:
    """Get site helpers bound to the configured theme root and routes."""
    return create_site_helpers(get_rules(settings).site)


# --- Request Context ---
def get_current_page(
    request: Request,
    builder: PagingLinkBuilder = Depends(get_paging_link_builder),
) -> int:
    """
    Current page from the query string.

    Absent means page 1; a malformed value is a 400, not a silent default.
    """
    try:
        return builder.read_page(request.query_params)
    except InvalidArgumentError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e
