"""Tests for build_feed.fetch_feed module."""

from datetime import datetime
from unittest.mock import Mock, patch

import pytest
import requests

from build_feed.config import FeedConfig
from build_feed.fetch_feed import FeedSession, fetch_csv_text, load_feed, read_csv_source

CONFIG = FeedConfig(start_date=datetime(2026, 2, 10), batch_size=3)

CSV_TEXT = (
    "Article Title,Article Content,wp_category,Slug\n"
    "First,<p>a</p>,Care,first\n"
    "Second,<p>b</p>,Care,second\n"
)


class TestFetchCsvText:
    @patch("build_feed.fetch_feed.requests.get")
    def test_returns_response_text(self, mock_get) -> None:
        mock_response = Mock()
        mock_response.text = CSV_TEXT
        mock_get.return_value = mock_response

        assert fetch_csv_text("https://example.com/articles.csv", timeout=5) == CSV_TEXT
        mock_response.raise_for_status.assert_called_once()
        _, kwargs = mock_get.call_args
        assert kwargs["timeout"] == 5
        assert "User-Agent" in kwargs["headers"]

    @patch("build_feed.fetch_feed.requests.get")
    def test_raises_on_http_error(self, mock_get) -> None:
        mock_get.return_value.raise_for_status.side_effect = requests.HTTPError("404 Client Error")
        with pytest.raises(requests.HTTPError, match="404"):
            fetch_csv_text("https://example.com/articles.csv")


class TestReadCsvSource:
    @patch("build_feed.fetch_feed.fetch_csv_text")
    def test_urls_are_fetched(self, mock_fetch) -> None:
        mock_fetch.return_value = CSV_TEXT
        assert read_csv_source("https://example.com/articles.csv", timeout=7) == CSV_TEXT
        mock_fetch.assert_called_once_with("https://example.com/articles.csv", timeout=7)

    def test_local_files_are_read(self, tmp_path) -> None:
        path = tmp_path / "articles.csv"
        path.write_text("\ufeff" + CSV_TEXT, encoding="utf-8")
        assert read_csv_source(str(path)) == CSV_TEXT


class TestLoadFeed:
    def test_builds_snapshot(self, tmp_path) -> None:
        path = tmp_path / "articles.csv"
        path.write_text(CSV_TEXT, encoding="utf-8")

        snapshot = load_feed(str(path), CONFIG)
        assert snapshot.ok
        assert snapshot.error is None
        assert snapshot.source == str(path)
        assert [a.slug for a in snapshot.articles] == ["first", "second"]

    @patch("build_feed.fetch_feed.requests.get")
    def test_http_error_gives_empty_snapshot(self, mock_get) -> None:
        mock_get.return_value.raise_for_status.side_effect = requests.HTTPError("500 Server Error")

        snapshot = load_feed("https://example.com/articles.csv", CONFIG)
        assert not snapshot.ok
        assert snapshot.articles == ()
        assert "500" in snapshot.error

    def test_connection_error_gives_empty_snapshot(self) -> None:
        fetch = Mock(side_effect=requests.ConnectionError("refused"))
        snapshot = load_feed("https://example.com/articles.csv", CONFIG, fetch=fetch)
        assert snapshot.articles == ()
        assert snapshot.error == "refused"

    def test_missing_file_gives_empty_snapshot(self, tmp_path) -> None:
        snapshot = load_feed(str(tmp_path / "nope.csv"), CONFIG)
        assert snapshot.articles == ()
        assert snapshot.error

    def test_garbage_payload_is_not_an_error(self) -> None:
        snapshot = load_feed("inline", CONFIG, fetch=lambda source, timeout: "<html>oops</html>")
        assert snapshot.ok
        assert snapshot.articles == ()


class TestFeedSession:
    def test_refresh_assigns_new_snapshot(self) -> None:
        fetch = Mock(return_value=CSV_TEXT)
        session = FeedSession("inline", CONFIG, fetch=fetch)
        assert session.snapshot is None

        first = session.refresh()
        assert session.snapshot is first
        assert len(first.articles) == 2

        second = session.refresh()
        assert session.snapshot is second
        assert second is not first
        assert second.articles == first.articles
        assert fetch.call_count == 2

    def test_result_discarded_when_closed_during_fetch(self) -> None:
        session = None

        def fetch(source, timeout):
            session.close()
            return CSV_TEXT

        session = FeedSession("inline", CONFIG, fetch=fetch)
        assert session.refresh() is None
        assert session.snapshot is None
        assert session.closed

    def test_closed_session_does_not_fetch(self) -> None:
        fetch = Mock(return_value=CSV_TEXT)
        session = FeedSession("inline", CONFIG, fetch=fetch)
        session.close()
        assert session.refresh() is None
        fetch.assert_not_called()

    def test_close_drops_snapshot(self) -> None:
        session = FeedSession("inline", CONFIG, fetch=Mock(return_value=CSV_TEXT))
        session.refresh()
        session.close()
        assert session.snapshot is None

    def test_failed_fetch_snapshot_has_error(self) -> None:
        session = FeedSession("inline", CONFIG, fetch=Mock(side_effect=OSError("disk")))
        snapshot = session.refresh()
        assert snapshot.articles == ()
        assert snapshot.error == "disk"
