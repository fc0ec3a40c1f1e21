from pydantic import BaseModel, Field


class PagingRules(BaseModel):
    query_param: str = "p"
    # Formatted with url= and page=
    url_format: str = "{url}?p={page}"


class VideoProviderRule(BaseModel):
    name: str
    # Regex with a named group "id"
    pattern: str
    embed_url: str


class RenderRules(BaseModel):
    code_block_class: str = "prettyprint"
    markdown_extensions: list[str] = Field(default_factory=list)
    # Empty list means the built-in providers
    video_providers: list[VideoProviderRule] = Field(default_factory=list)
    video_width: int = 560
    video_height: int = 315


class GravatarRules(BaseModel):
    base_url: str = "https://www.gravatar.com/avatar"
    default: str = "identicon"
    rating: str = "g"


class ImagesRules(BaseModel):
    path_separator: str = "/"
    gravatar: GravatarRules = Field(default_factory=GravatarRules)
    # May contain {size}; None means no category fallback image
    category_default_url: str | None = None
    badge_root: str = "/content/badges"
    image_extensions: list[str] = Field(
        default_factory=lambda: [".jpg", ".jpeg", ".gif", ".bmp", ".png"]
    )


class SiteRules(BaseModel):
    theme_root: str = "themes"
    category_url_identifier: str = "category"
    static_extensions: list[str] = Field(
        default_factory=lambda: [
            ".axd",
            ".ashx",
            ".bmp",
            ".css",
            ".gif",
            ".htm",
            ".html",
            ".ico",
            ".jpeg",
            ".jpg",
            ".js",
            ".png",
            ".rar",
            ".zip",
        ]
    )


class ProbeRules(BaseModel):
    timeout_seconds: float = Field(default=3.0, gt=0)


class StorageRules(BaseModel):
    base_path: str = "./data/uploads"
    public_prefix: str = "/content/uploads"


class Rules(BaseModel):
    paging: PagingRules = Field(default_factory=PagingRules)
    render: RenderRules = Field(default_factory=RenderRules)
    images: ImagesRules = Field(default_factory=ImagesRules)
    site: SiteRules = Field(default_factory=SiteRules)
    probe: ProbeRules = Field(default_factory=ProbeRules)
    storage: StorageRules = Field(default_factory=StorageRules)
