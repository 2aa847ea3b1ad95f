"""Slug normalization and per-build collision handling."""

import re

from build_feed.models import ArticleRow

FALLBACK_SLUG = "post"

_QUOTES_RE = re.compile(r"['\"‘’“”]")
_NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")


def normalize_slug(text: str | None) -> str:
    """Turn arbitrary text into a URL-safe token; empty input gives "post"."""
    token = (text or "").lower().strip()
    token = _QUOTES_RE.sub("", token)
    token = _NON_ALNUM_RE.sub("-", token)
    token = token.strip("-")
    return token or FALLBACK_SLUG


def disambiguate_slug(token: str, used: set[str]) -> str:
    """Return `token`, or `token-N` for the first free N >= 2, and record it in `used`."""
    candidate = token
    suffix = 2
    while candidate in used:
        candidate = f"{token}-{suffix}"
        suffix += 1
    used.add(candidate)
    return candidate


def resolve_slug(row: ArticleRow, used: set[str]) -> str:
    """Pick the row's own slug when present, else slugify the title, then disambiguate."""
    source = row.slug if row.slug.strip() else row.title
    return disambiguate_slug(normalize_slug(source), used)
