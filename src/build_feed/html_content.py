"""Image extraction and presentation cleanup for article HTML.

The HTML comes from our own content CSV and is trusted. Nothing here is a
sanitizer: scripts, iframes and unknown tags pass through untouched.
"""

import re
from html import unescape
from typing import Optional

FEATURED_IMAGE_POLICIES = ("last", "first")

EXCERPT_LENGTH = 150

_IMG_SRC_RE = re.compile(r"<img[^>]+src=[\"']([^\"']+)[\"'][^>]*>", re.I)
_BARE_IMAGE_URL_RE = re.compile(
    r"(https?://[^\s\"'<>]+\.(?:png|jpe?g|webp|gif))\b(?:\?[^\s\"'<>]*)?",
    re.I,
)

_EMPHASIS_TAG_RE = re.compile(r"</?(?:strong|b)\b[^>]*>", re.I)
# Opening tag with quoted values consumed whole, so a ">" inside a value does not end the tag.
_OPEN_TAG_RE = re.compile(r"<([a-zA-Z][^\s/>]*)((?:\"[^\"]*\"|'[^']*'|[^'\">])*)>")
_ATTRIBUTE_RE = re.compile(
    r"(\s+)([^\s\"'>/=]+)(\s*=\s*(?:\"[^\"]*\"|'[^']*'|[^\s\"'>]+))?"
)
_BR_RUN_RE = re.compile(r"(?:<br\b[^>]*>\s*){2,}<br\b[^>]*>", re.I)

_TAG_RE = re.compile(r"<[^>]+>")
_WHITESPACE_RE = re.compile(r"\s+")


def extract_image_urls(html: Optional[str]) -> list[str]:
    """Image URLs from <img> src attributes, then bare image links, de-duplicated in first-seen order.

    Bare links are cut at the file extension, so a query string is not part of the URL.
    """
    text = html or ""
    found = _IMG_SRC_RE.findall(text)
    found.extend(m.group(1) for m in _BARE_IMAGE_URL_RE.finditer(text))
    return list(dict.fromkeys(found))


def select_featured_image(urls: list[str], policy: str = "last") -> Optional[str]:
    """Pick the featured image. "last" is the house rule; "first" exists for comparison."""
    if policy not in FEATURED_IMAGE_POLICIES:
        raise ValueError(
            f"Invalid featured image policy: {policy}. Must be one of {FEATURED_IMAGE_POLICIES}"
        )
    if not urls:
        return None
    return urls[-1] if policy == "last" else urls[0]


def _drop_attributes(html: str, names: frozenset[str]) -> str:
    def strip_tag(tag: re.Match) -> str:
        attrs = _ATTRIBUTE_RE.sub(
            lambda a: "" if a.group(2).lower() in names else a.group(0),
            tag.group(2),
        )
        return f"<{tag.group(1)}{attrs}>"

    return _OPEN_TAG_RE.sub(strip_tag, html)


def clean_markup(html: Optional[str]) -> str:
    """Remove presentation-only markup so the renderer controls styling.

    Order: emphasis tags, style attributes, width/height attributes, then
    runs of 3+ <br> collapse to two. Running it twice changes nothing.
    """
    h = html or ""
    h = _EMPHASIS_TAG_RE.sub("", h)
    h = _drop_attributes(h, frozenset({"style"}))
    h = _drop_attributes(h, frozenset({"width", "height"}))
    h = _BR_RUN_RE.sub("<br><br>", h)
    return h


def strip_tags(html: Optional[str]) -> str:
    """Plain text from HTML: tags become spaces, entities unescaped, whitespace collapsed."""
    if not html:
        return ""
    text = _TAG_RE.sub(" ", html)
    text = unescape(text)
    return _WHITESPACE_RE.sub(" ", text).strip()


def make_excerpt(html: Optional[str], length: int = EXCERPT_LENGTH) -> str:
    text = strip_tags(html)
    if len(text) > length:
        return text[:length] + "..."
    return text
