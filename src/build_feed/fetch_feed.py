"""Fetching the article CSV and turning it into feed snapshots."""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Optional

import requests

from build_feed.build_feed import build_feed
from build_feed.config import DEFAULT_HTTP_TIMEOUT, FeedConfig
from build_feed.models import FeedSnapshot

logger = logging.getLogger(__name__)

USER_AGENT = "article-feed/1.0 (CSV reader)"


def fetch_csv_text(url: str, timeout: int = DEFAULT_HTTP_TIMEOUT) -> str:
    """Download the CSV asset. Raises requests.RequestException on failure."""
    response = requests.get(
        url,
        timeout=timeout,
        headers={"User-Agent": USER_AGENT},
    )
    response.raise_for_status()
    response.encoding = "utf-8"
    return response.text


def read_csv_source(source: str, timeout: int = DEFAULT_HTTP_TIMEOUT) -> str:
    """Read CSV text from an http(s) URL or a local path."""
    if source.startswith(("http://", "https://")):
        return fetch_csv_text(source, timeout=timeout)
    return Path(source).read_text(encoding="utf-8-sig")


def load_feed(
    source: str,
    config: FeedConfig,
    timeout: int = DEFAULT_HTTP_TIMEOUT,
    fetch: Callable[[str, int], str] = read_csv_source,
) -> FeedSnapshot:
    """Fetch and build one feed snapshot.

    A fetch failure never propagates: it is logged and returned as an empty
    snapshot with `error` set.
    """
    fetched_at = datetime.now(timezone.utc)
    try:
        csv_text = fetch(source, timeout)
    except (requests.RequestException, OSError, UnicodeDecodeError) as e:
        logger.error("Failed to fetch article CSV from %s: %s", source, e)
        return FeedSnapshot(
            articles=(),
            fetched_at=fetched_at,
            error=str(e) or type(e).__name__,
            source=source,
        )

    return FeedSnapshot(articles=build_feed(csv_text, config), fetched_at=fetched_at, source=source)


class FeedSession:
    """One page view's feed: fetches on refresh, drops results once closed.

    Each refresh replaces the snapshot with a new immutable one; nothing is
    shared between sessions.
    """

    def __init__(
        self,
        source: str,
        config: FeedConfig,
        timeout: int = DEFAULT_HTTP_TIMEOUT,
        fetch: Callable[[str, int], str] = read_csv_source,
    ):
        self.source = source
        self.config = config
        self.timeout = timeout
        self._fetch = fetch
        self._snapshot: Optional[FeedSnapshot] = None
        self._closed = False

    @property
    def snapshot(self) -> Optional[FeedSnapshot]:
        return self._snapshot

    @property
    def closed(self) -> bool:
        return self._closed

    def refresh(self) -> Optional[FeedSnapshot]:
        """Fetch and build a new snapshot. Returns None if the session closed meanwhile."""
        if self._closed:
            logger.debug("Session for %s is closed; not fetching", self.source)
            return None

        snapshot = load_feed(self.source, self.config, timeout=self.timeout, fetch=self._fetch)

        if self._closed:
            logger.debug("Session for %s closed during fetch; discarding result", self.source)
            return None

        self._snapshot = snapshot
        return snapshot

    def close(self) -> None:
        self._closed = True
        self._snapshot = None
