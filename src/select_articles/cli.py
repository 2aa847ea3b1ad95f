"""CLI for looking up published articles."""

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Optional

from dotenv import load_dotenv

from build_feed.config import load_config
from build_feed.fetch_feed import load_feed
from common.cli_helpers import setup_logging, write_json
from select_articles.further_reading import pick_further_reading
from select_articles.helpers import article_summary, parse_select_articles_args
from select_articles.select_articles import (
    filter_by_category,
    find_by_slug,
    list_categories,
    related_to,
    search,
)

logger = logging.getLogger(__name__)


def main(argv: Optional[list[str]] = None) -> None:
    args = parse_select_articles_args(argv)

    load_dotenv()
    setup_logging()

    site = load_config(args.config)
    snapshot = load_feed(args.source or site.csv_url, site.feed, timeout=site.timeout)
    if not snapshot.ok:
        logger.error("Feed unavailable: %s", snapshot.error)
        raise SystemExit(1)

    feed = snapshot.articles

    if args.slug:
        article = find_by_slug(feed, args.slug, args.now)
        if article is None:
            logger.error("Article not found: %s", args.slug)
            raise SystemExit(1)
        write_json(
            {
                "article": {**article_summary(article), "content": article.cleaned_content},
                "related": [article_summary(a) for a in related_to(feed, article, args.limit, args.now)],
                "further_reading": [asdict(link) for link in pick_further_reading(article.slug)],
            }
        )
        return

    if args.categories:
        write_json(list_categories(feed, args.now))
        return

    if args.search is not None:
        results = search(feed, args.search, args.now)
    else:
        results = filter_by_category(feed, args.category, args.now)

    logger.info("%d matching articles", len(results))
    write_json([article_summary(a) for a in results])


if __name__ == "__main__":
    main()
