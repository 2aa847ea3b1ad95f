"""Helper functions for build_feed CLI."""

from __future__ import annotations

import argparse
from datetime import datetime
from typing import Optional

from build_feed.models import FeedSnapshot
from build_feed.schedule import count_upcoming, visible_articles
from common.cli_helpers import parse_datetime_arg


def parse_build_feed_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    '''Parse CLI arguments for build_feed.'''

    parser = argparse.ArgumentParser(description="Build the article feed from the CSV asset.")
    parser.add_argument(
        "--config",
        default=None,
        help="Config name under configs/ (default: $FEED_CONFIG or 'blog').",
    )
    parser.add_argument(
        "--source",
        default=None,
        help="CSV URL or local path (default: csv_url from the config).",
    )
    parser.add_argument(
        "--now",
        type=parse_datetime_arg,
        default=None,
        help="Evaluate visibility at this time instead of the current time.",
    )
    parser.add_argument(
        "--all",
        action="store_true",
        help="Include articles that are not published yet.",
    )
    parser.add_argument("--load-local", action="store_true", help="Save articles to a local JSONL file")
    parser.add_argument("--output-dir", default="output")
    return parser.parse_args(argv)


def summarize_feed(snapshot: FeedSnapshot, now: Optional[datetime] = None) -> dict:
    '''Counts and categories for logging a built feed.'''

    visible = visible_articles(snapshot.articles, now)
    return {
        "source": snapshot.source,
        "total": len(snapshot.articles),
        "visible": len(visible),
        "upcoming": count_upcoming(snapshot.articles, now),
        "categories": sorted({a.category for a in visible}),
    }
