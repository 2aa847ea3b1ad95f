"""YAML configuration loader for the article feed."""

import os
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv

from build_feed.html_content import FEATURED_IMAGE_POLICIES
from common.config import CONFIG_DIR, env_bool, find_config_path, load_yaml
from common.datetime import to_datetime

# Load .env file if it exists
load_dotenv()

DEFAULT_START_DATE = datetime(2026, 2, 10)
DEFAULT_BATCH_SIZE = 3
DEFAULT_CSV_URL = "public/articles.csv"
DEFAULT_HTTP_TIMEOUT = 30


@dataclass
class FeedConfig:
    """Variation points of the feed build."""

    start_date: datetime = DEFAULT_START_DATE
    batch_size: int = DEFAULT_BATCH_SIZE
    require_slug_column: bool = False
    featured_image: str = "last"

    def __post_init__(self) -> None:
        # YAML hands dates over as datetime.date, env vars as strings
        try:
            self.start_date = to_datetime(self.start_date)
        except ValueError as exc:
            raise ValueError(f"Invalid start_date: {self.start_date!r}") from exc

        if isinstance(self.batch_size, bool) or not isinstance(self.batch_size, int):
            raise ValueError(f"Invalid batch_size: {self.batch_size!r}. Must be an integer")
        if self.batch_size <= 0:
            raise ValueError(f"Invalid batch_size: {self.batch_size}. Must be > 0")

        if self.featured_image not in FEATURED_IMAGE_POLICIES:
            raise ValueError(
                f"Invalid featured_image: {self.featured_image}. "
                f"Must be one of {list(FEATURED_IMAGE_POLICIES)}"
            )


@dataclass
class SiteConfig:
    """Where the CSV lives plus the feed settings for one page variant."""

    name: str
    feed: FeedConfig = field(default_factory=FeedConfig)
    csv_url: str = DEFAULT_CSV_URL
    timeout: int = DEFAULT_HTTP_TIMEOUT

    def __post_init__(self) -> None:
        if not self.csv_url:
            raise ValueError("csv_url must not be empty")
        if self.timeout <= 0:
            raise ValueError(f"Invalid timeout: {self.timeout}. Must be > 0")


def _apply_env_overrides(raw: dict) -> dict:
    overrides = {
        "FEED_CSV_URL": ("csv_url", str),
        "FEED_START_DATE": ("start_date", str),
        "FEED_BATCH_SIZE": ("batch_size", int),
        "FEED_REQUIRE_SLUG": ("require_slug_column", env_bool),
        "FEED_FEATURED_IMAGE": ("featured_image", str),
        "FEED_HTTP_TIMEOUT": ("timeout", int),
    }
    merged = dict(raw)
    for env_var, (key, convert) in overrides.items():
        value = os.environ.get(env_var)
        if value:
            merged[key] = convert(value)
    return merged


def load_config(config_name: str | None = None, config_dir: Path = CONFIG_DIR) -> SiteConfig:
    """Load a page-variant config from configs/<name>.yaml with env overrides.

    The name comes from the argument, then FEED_CONFIG, then "blog".
    """
    path = find_config_path(config_name, config_dir, default_name="blog", env_var="FEED_CONFIG")
    raw = _apply_env_overrides(load_yaml(path))

    feed = FeedConfig(
        start_date=raw.get("start_date", DEFAULT_START_DATE),
        batch_size=raw.get("batch_size", DEFAULT_BATCH_SIZE),
        require_slug_column=bool(raw.get("require_slug_column", False)),
        featured_image=raw.get("featured_image", "last"),
    )
    return SiteConfig(
        name=path.stem,
        feed=feed,
        csv_url=raw.get("csv_url", DEFAULT_CSV_URL),
        timeout=raw.get("timeout", DEFAULT_HTTP_TIMEOUT),
    )
