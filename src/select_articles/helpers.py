"""Helper functions for select_articles CLI."""

from __future__ import annotations

import argparse
from typing import Optional

from build_feed.models import Article
from common.cli_helpers import parse_datetime_arg
from select_articles.select_articles import DEFAULT_RELATED_LIMIT


def parse_select_articles_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    '''Parse CLI arguments for select_articles.'''

    parser = argparse.ArgumentParser(description="Look up articles in the published feed.")
    parser.add_argument("--config", default=None, help="Config name under configs/.")
    parser.add_argument("--source", default=None, help="CSV URL or local path.")
    parser.add_argument("--now", type=parse_datetime_arg, default=None)
    parser.add_argument("--limit", type=int, default=DEFAULT_RELATED_LIMIT)

    query = parser.add_mutually_exclusive_group(required=True)
    query.add_argument("--slug", help="Show one article with related articles and further reading.")
    query.add_argument("--search", help="Search titles, content and categories.")
    query.add_argument("--category", help="List a category ('all' for everything).")
    query.add_argument("--categories", action="store_true", help="List visible categories.")
    return parser.parse_args(argv)


def article_summary(article: Article) -> dict:
    '''Compact listing record for an article.'''

    return {
        "slug": article.slug,
        "title": article.title,
        "category": article.category,
        "publish_date": article.publish_date.isoformat(),
        "featured_image_url": article.featured_image_url,
        "excerpt": article.excerpt,
    }
