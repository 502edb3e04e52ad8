import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def parse_published_date(value: str) -> datetime.date:
    """Interpret a publishedAt string as a calendar date (ISO date or datetime)."""
    try:
        return datetime.date.fromisoformat(value)
    except ValueError:
        return datetime.datetime.fromisoformat(value).date()


class PostFrontmatter(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: str = Field(min_length=1)
    publishedAt: str = Field(min_length=1)
    summary: str = ""
    tags: List[str] = Field(default_factory=list)
    draft: bool = False

    @field_validator("title", "publishedAt", mode="before")
    @classmethod
    def _require_string(cls, value):
        if not isinstance(value, str):
            raise ValueError("must be a string")
        return value

    @field_validator("publishedAt")
    @classmethod
    def _require_calendar_date(cls, value: str) -> str:
        parse_published_date(value)
        return value

    @field_validator("summary", mode="before")
    @classmethod
    def _default_summary(cls, value):
        if value is None:
            return ""
        return value if isinstance(value, str) else str(value)

    @field_validator("tags", mode="before")
    @classmethod
    def _default_tags(cls, value):
        # YAML reads `tags: [recap, 2024]` with an int, and `tags: solo` as a string
        if value is None:
            return []
        if isinstance(value, (list, tuple)):
            return [str(item) for item in value if item is not None]
        return [str(value)]


class PostMetadata(BaseModel):
    model_config = ConfigDict(frozen=True)

    slug: str
    title: str
    summary: str = ""
    publishedAt: str
    tags: List[str] = Field(default_factory=list)

    @property
    def published_date(self) -> datetime.date:
        return parse_published_date(self.publishedAt)


class TocEntry(BaseModel):
    level: int
    id: str
    name: str
    children: List["TocEntry"] = Field(default_factory=list)


class Post(PostMetadata):
    content: str  # rendered HTML of the body
    toc: List[TocEntry] = Field(default_factory=list)


class PostNavigation(BaseModel):
    previous: Optional[PostMetadata] = None
    next: Optional[PostMetadata] = None


class PostPage(PostNavigation):
    post: Post


class SiteConfig(BaseModel):
    name: str
    description: str
    author: str
    url: str
