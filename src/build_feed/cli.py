"""CLI for building the article feed."""

from __future__ import annotations

import logging
from typing import Optional

from dotenv import load_dotenv

from build_feed.config import load_config
from build_feed.fetch_feed import load_feed
from build_feed.helpers import parse_build_feed_args, summarize_feed
from build_feed.schedule import visible_articles
from common.cli_helpers import setup_logging
from common.local_io import save_jsonl_records_local

logger = logging.getLogger(__name__)


def main(argv: Optional[list[str]] = None) -> None:
    args = parse_build_feed_args(argv)

    load_dotenv()
    setup_logging()

    site = load_config(args.config)
    source = args.source or site.csv_url
    logger.info("Building feed '%s' from %s", site.name, source)

    snapshot = load_feed(source, site.feed, timeout=site.timeout)
    if not snapshot.ok:
        logger.error("Feed build failed: %s", snapshot.error)
        raise SystemExit(1)

    summary = summarize_feed(snapshot, args.now)
    logger.info(
        "%d articles: %d visible, %d upcoming, categories: %s",
        summary["total"],
        summary["visible"],
        summary["upcoming"],
        ", ".join(summary["categories"]) or "-",
    )

    articles = list(snapshot.articles) if args.all else visible_articles(snapshot.articles, args.now)
    if not articles:
        logger.warning("No articles to save")
        return

    if args.load_local:
        prefix = "articles" if args.all else "visible_articles"
        save_jsonl_records_local(articles, prefix, output_dir=args.output_dir)


if __name__ == "__main__":
    main()
