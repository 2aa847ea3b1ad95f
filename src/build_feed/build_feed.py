"""Build the article feed from CSV text."""

import logging

from build_feed.config import FeedConfig
from build_feed.html_content import clean_markup, extract_image_urls, select_featured_image
from build_feed.models import Article, ArticleRow, UNCATEGORIZED
from build_feed.parse_csv import parse_rows
from build_feed.schedule import assign_publish_date
from build_feed.slugs import resolve_slug

logger = logging.getLogger(__name__)


def _keep_row(row: ArticleRow, config: FeedConfig) -> bool:
    if not row.title.strip():
        return False
    if config.require_slug_column and not row.slug.strip():
        return False
    return True


def _to_article(row: ArticleRow, index: int, slug: str, config: FeedConfig) -> Article:
    images = extract_image_urls(row.html_content)
    return Article(
        title=row.title.strip(),
        content=row.html_content,
        cleaned_content=clean_markup(row.html_content),
        category=row.category.strip() or UNCATEGORIZED,
        slug=slug,
        sequence_index=index,
        publish_date=assign_publish_date(index, config.start_date, config.batch_size),
        featured_image_url=select_featured_image(images, config.featured_image),
        image_urls=tuple(images),
        meta_title=row.meta_title,
        meta_description=row.meta_description,
        schema_markup=row.schema_markup,
        status=row.status,
    )


def build_feed(csv_text: str | None, config: FeedConfig) -> tuple[Article, ...]:
    """Parse the CSV and derive one Article per titled row, in CSV order.

    Never raises on bad content: malformed rows are dropped and an unreadable
    payload gives an empty feed. Slug collisions are resolved per call, so the
    same input always yields the same slugs.
    """
    parsed = parse_rows(csv_text)
    kept = [row for row in parsed.rows if _keep_row(row, config)]
    dropped = len(parsed.rows) - len(kept)
    if dropped:
        logger.info(
            "Dropped %d rows without a title%s",
            dropped,
            " or slug" if config.require_slug_column else "",
        )

    used_slugs: set[str] = set()
    articles = tuple(
        _to_article(row, index, resolve_slug(row, used_slugs), config)
        for index, row in enumerate(kept)
    )

    logger.info(
        "Built %d articles (%d malformed rows skipped)",
        len(articles),
        parsed.skipped,
    )
    return articles
