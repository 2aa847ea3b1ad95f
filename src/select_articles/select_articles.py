"""Slug lookup, related articles, category listing and search over the visible feed."""

import logging
from datetime import datetime
from typing import Iterable, Optional

from build_feed.html_content import strip_tags
from build_feed.models import Article, UNCATEGORIZED
from build_feed.schedule import visible_articles

logger = logging.getLogger(__name__)

DEFAULT_RELATED_LIMIT = 3
ALL_CATEGORIES = "all"


def find_by_slug(
    feed: Iterable[Article],
    slug: str,
    now: Optional[datetime] = None,
) -> Optional[Article]:
    """Visible article with this slug, or None. Embargoed articles are never returned."""
    for article in visible_articles(feed, now):
        if article.slug == slug:
            return article
    logger.debug("No visible article with slug %s", slug)
    return None


def related_to(
    feed: Iterable[Article],
    article: Article,
    limit: int = DEFAULT_RELATED_LIMIT,
    now: Optional[datetime] = None,
) -> list[Article]:
    """Up to `limit` visible articles: same category first, then others, both in feed order."""
    if limit <= 0:
        return []

    candidates = [a for a in visible_articles(feed, now) if a.slug != article.slug]
    same_category = [a for a in candidates if a.category == article.category]
    others = [a for a in candidates if a.category != article.category]
    return (same_category + others)[:limit]


def filter_by_category(
    feed: Iterable[Article],
    category: Optional[str],
    now: Optional[datetime] = None,
) -> list[Article]:
    """Visible articles in `category`; blank or "all" returns every visible article."""
    visible = visible_articles(feed, now)
    if not category or category == ALL_CATEGORIES:
        return visible
    return [a for a in visible if a.category == category]


def list_categories(feed: Iterable[Article], now: Optional[datetime] = None) -> list[str]:
    """Distinct categories of visible articles in first-appearance order.

    Articles without a category are left out of the list; they still match
    a filter on "uncategorized".
    """
    categories = (a.category for a in visible_articles(feed, now))
    return list(dict.fromkeys(c for c in categories if c != UNCATEGORIZED))


def _matches(article: Article, needle: str) -> bool:
    haystacks = (article.title, strip_tags(article.content), article.category)
    return any(needle in text.lower() for text in haystacks)


def search(
    feed: Iterable[Article],
    query: Optional[str],
    now: Optional[datetime] = None,
) -> list[Article]:
    """Case-insensitive substring search over title, plain-text content and category.

    An empty query returns the whole visible feed.
    """
    visible = visible_articles(feed, now)
    needle = (query or "").strip().lower()
    if not needle:
        return visible
    return [a for a in visible if _matches(a, needle)]
