"""Data models for the build_feed pipeline stage."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from build_feed.html_content import make_excerpt

UNCATEGORIZED = "uncategorized"


@dataclass(frozen=True)
class ArticleRow:
    """One CSV record mapped from header text to explicit fields."""
    title: str = ""
    html_content: str = ""
    category: str = ""
    slug: str = ""
    meta_title: str = ""
    meta_description: str = ""
    schema_markup: str = ""
    status: str = ""


@dataclass(frozen=True)
class Article:
    """Article derived from a row: slug, publish date, images and cleaned HTML resolved."""
    title: str
    content: str
    cleaned_content: str
    category: str
    slug: str
    sequence_index: int
    publish_date: datetime
    featured_image_url: Optional[str] = None
    image_urls: tuple[str, ...] = ()
    meta_title: str = ""
    meta_description: str = ""
    schema_markup: str = ""
    status: str = ""

    @property
    def excerpt(self) -> str:
        return make_excerpt(self.content)


@dataclass(frozen=True)
class FeedSnapshot:
    """Result of one fetch-and-build cycle. `error` is set when the fetch failed."""
    articles: tuple[Article, ...]
    fetched_at: datetime
    error: Optional[str] = None
    source: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None
