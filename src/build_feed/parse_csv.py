"""CSV parsing for the article asset."""

from __future__ import annotations

import csv
import io
import logging
from dataclasses import dataclass, field

from build_feed.models import ArticleRow

logger = logging.getLogger(__name__)

# CSV header text -> ArticleRow field
COLUMNS = {
    "Article Title": "title",
    "Article Content": "html_content",
    "wp_category": "category",
    "Slug": "slug",
    "Meta Title": "meta_title",
    "Meta Description": "meta_description",
    "Schema Markup": "schema_markup",
    "Status": "status",
}


@dataclass
class ParseResult:
    """Rows that parsed cleanly plus a count of the ones dropped."""
    rows: list[ArticleRow] = field(default_factory=list)
    skipped: int = 0


def _clean_header(name: str) -> str:
    return name.replace("\ufeff", "").strip()


def _to_row(header: list[str], values: list[str]) -> ArticleRow:
    fields = {}
    for name, value in zip(header, values):
        attr = COLUMNS.get(name)
        if attr is not None:
            fields[attr] = value or ""
    return ArticleRow(**fields)


def parse_rows(csv_text: str | None) -> ParseResult:
    """Parse header-keyed CSV text into ArticleRows.

    Blank lines are ignored. A row that raises a CSV error (bad quoting) or
    carries more fields than the header is logged and dropped; the rest of the
    file is still read. A quote that is never closed would otherwise swallow
    every later line, so after any CSV error parsing resumes on the line after
    the bad record started. Rows with fewer fields leave the missing columns
    blank.
    """
    result = ParseResult()
    if not csv_text or not csv_text.strip():
        logger.warning("Empty CSV payload")
        return result

    # Article HTML with inline images can exceed the default field limit.
    csv.field_size_limit(max(csv.field_size_limit(), len(csv_text)))

    lines = io.StringIO(csv_text, newline="").readlines()
    reader = csv.reader(lines, strict=True)
    try:
        header = [_clean_header(name) for name in next(reader)]
    except (StopIteration, csv.Error) as e:
        logger.warning("Unable to read CSV header: %s", e)
        return result

    if "Article Title" not in header:
        logger.warning("CSV header has no 'Article Title' column: %s", header)

    offset = 0
    while True:
        record_start = offset + reader.line_num
        try:
            values = next(reader)
        except StopIteration:
            break
        except csv.Error as e:
            logger.warning("Skipping malformed CSV row at line %d: %s", record_start + 1, e)
            result.skipped += 1
            offset = record_start + 1
            reader = csv.reader(lines[offset:], strict=True)
            continue

        if not any(value.strip() for value in values):
            continue

        if len(values) > len(header):
            logger.warning(
                "Skipping CSV row at line %d: %d fields, header has %d",
                record_start + 1,
                len(values),
                len(header),
            )
            result.skipped += 1
            continue

        result.rows.append(_to_row(header, values))

    return result
