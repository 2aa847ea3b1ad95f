"""Drip-feed publish dates and the visibility filter."""

from datetime import datetime, timedelta
from typing import Iterable, Optional

from build_feed.models import Article
from common.datetime import match_awareness, now_like


def assign_publish_date(sequence_index: int, start_date: datetime, batch_size: int) -> datetime:
    """Release `batch_size` articles per day starting at `start_date`.

    Indices 0..batch_size-1 share `start_date`, the next batch gets the day
    after, and so on. The time of day on `start_date` is kept.
    """
    if batch_size <= 0:
        raise ValueError(f"batch_size must be positive, got {batch_size}")
    if sequence_index < 0:
        raise ValueError(f"sequence_index must be >= 0, got {sequence_index}")
    return start_date + timedelta(days=sequence_index // batch_size)


def is_visible(article: Article, now: Optional[datetime] = None) -> bool:
    """An article is visible once its publish date is not in the future."""
    if now is None:
        now = now_like(article.publish_date)
    else:
        now = match_awareness(now, article.publish_date)
    return article.publish_date <= now


def visible_articles(feed: Iterable[Article], now: Optional[datetime] = None) -> list[Article]:
    """Visible subset of the feed in feed order, evaluated against `now` on every call."""
    return [article for article in feed if is_visible(article, now)]


def count_upcoming(feed: Iterable[Article], now: Optional[datetime] = None) -> int:
    """Number of articles still embargoed."""
    return sum(1 for article in feed if not is_visible(article, now))
