from typing import Protocol
from uuid import UUID, uuid4

from pydantic import BaseModel, Field

# --- Capabilities ---


class HasDisplayName(Protocol):
    """Entity that can title a page on its own."""

    @property
    def display_name(self) -> str: ...


# --- Forum ---


class Category(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    name: str
    slug: str
    description: str | None = None
    # Stored file name, empty when nothing was uploaded
    image: str = ""

    @property
    def display_name(self) -> str:
        return self.name


class Topic(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    name: str
    slug: str
    category_id: UUID | None = None

    @property
    def display_name(self) -> str:
        return self.name


class Member(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    username: str
    email: str
    avatar: str = ""

    @property
    def display_name(self) -> str:
        return self.username


class Post(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    topic_id: UUID
    content: str = ""
