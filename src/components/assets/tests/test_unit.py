"""
Assets component unit tests.

Tests for avatar and category image URL entry points.
"""

from __future__ import annotations

from uuid import UUID, uuid4

import pytest

from src.components.assets import (
    AvatarUrlInput,
    CategoryImageUrlInput,
    ImageUrlConfig,
    ImageUrlResolver,
    run,
    run_avatar_url,
    run_category_image_url,
)

# --- Mock Storage ---


class MockStorage:
    """Storage backend that records calls."""

    def __init__(self) -> None:
        self.calls: list[tuple[UUID, str, str, str]] = []

    def build_file_url(
        self,
        owner_id: UUID,
        path_separator: str,
        file_name: str,
        query_suffix: str,
    ) -> str:
        self.calls.append((owner_id, path_separator, file_name, query_suffix))
        return f"https://cdn.example.com/{owner_id}{path_separator}{file_name}{query_suffix}"


@pytest.fixture
def storage() -> MockStorage:
    return MockStorage()


@pytest.fixture
def resolver(storage: MockStorage) -> ImageUrlResolver:
    return ImageUrlResolver(storage=storage)


class TestRunAvatarUrl:
    """Test avatar entry point."""

    def test_stored_avatar(self, resolver: ImageUrlResolver, storage: MockStorage) -> None:
        owner_id = uuid4()
        inp = AvatarUrlInput(
            owner_id=owner_id,
            identity_key="user@example.com",
            size=50,
            stored_file_name="pic.png",
        )
        result = run_avatar_url(inp, resolver)

        assert result.success is True
        assert result.url == f"https://cdn.example.com/{owner_id}/pic.png?width=50&crop=0,0,50,50"
        assert storage.calls == [(owner_id, "/", "pic.png", "?width=50&crop=0,0,50,50")]

    def test_gravatar_fallback(self, resolver: ImageUrlResolver, storage: MockStorage) -> None:
        inp = AvatarUrlInput(owner_id=uuid4(), identity_key="user@example.com", size=50)
        result = run_avatar_url(inp, resolver)

        assert result.url is not None
        assert result.url.startswith("https://www.gravatar.com/avatar/")
        assert storage.calls == []

    def test_invalid_size_reported(self, resolver: ImageUrlResolver) -> None:
        inp = AvatarUrlInput(owner_id=uuid4(), identity_key="user@example.com", size=0)
        result = run_avatar_url(inp, resolver)

        assert result.success is False
        assert result.url is None
        assert result.errors[0].field == "size"


class TestRunCategoryImageUrl:
    """Test category image entry point."""

    def test_no_image_no_default(self, resolver: ImageUrlResolver) -> None:
        """No stored image and no default gives None, successfully."""
        result = run_category_image_url(CategoryImageUrlInput(owner_id=uuid4(), size=80), resolver)

        assert result.success is True
        assert result.url is None

    def test_configured_default(self, storage: MockStorage) -> None:
        config = ImageUrlConfig(category_default_url="/content/images/category-{size}.png")
        resolver = ImageUrlResolver(storage=storage, config=config)

        result = run_category_image_url(CategoryImageUrlInput(owner_id=uuid4(), size=80), resolver)

        assert result.url == "/content/images/category-80.png"

    def test_stored_image(self, resolver: ImageUrlResolver) -> None:
        owner_id = uuid4()
        inp = CategoryImageUrlInput(owner_id=owner_id, size=80, stored_file_name="cat.jpg")
        result = run_category_image_url(inp, resolver)

        assert result.url == f"https://cdn.example.com/{owner_id}/cat.jpg?width=80&crop=0,0,80,80"


class TestRunDispatch:
    """Test main dispatcher."""

    def test_dispatches_by_input(self, resolver: ImageUrlResolver) -> None:
        result = run(CategoryImageUrlInput(owner_id=uuid4(), size=10), resolver)
        assert result.url is None

    def test_unknown_input(self, resolver: ImageUrlResolver) -> None:
        with pytest.raises(ValueError):
            run("not an input", resolver)  # type: ignore[arg-type]
