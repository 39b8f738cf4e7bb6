"""
Tests for listing helpers (publish filter, featured split, recency sort)
"""
from datetime import datetime, timezone

from app.apps.pages.listing import (
    display_date,
    parse_timestamp,
    partition_featured,
    published_only,
    sort_recent,
)

from conftest import make_post


class TestPartition:
    def test_published_only(self):
        posts = [make_post("a"), make_post("b", status="draft"), make_post("c", status="archived")]

        assert [post["slug"] for post in published_only(posts)] == ["a"]

    def test_partition_keeps_order(self):
        posts = [make_post("a", featured=True), make_post("b"), make_post("c", featured=True)]

        featured, others = partition_featured(posts)

        assert [post["slug"] for post in featured] == ["a", "c"]
        assert [post["slug"] for post in others] == ["b"]


class TestDates:
    def test_publish_date_wins(self):
        post = make_post("a", publish_date="2024-03-01T00:00:00Z", created_at="2024-01-01T00:00:00Z")

        assert display_date(post) == datetime(2024, 3, 1, tzinfo=timezone.utc)

    def test_created_at_fallback(self):
        post = make_post("a", created_at="2024-01-05T12:00:00.000Z")

        assert display_date(post) == datetime(2024, 1, 5, 12, tzinfo=timezone.utc)

    def test_naive_and_bad_values(self):
        assert parse_timestamp("2024-01-01T00:00:00").tzinfo == timezone.utc
        assert parse_timestamp("not a date") is None
        assert parse_timestamp(None) is None


class TestSortRecent:
    def test_newest_first(self):
        posts = [
            make_post("old", publish_date="2023-01-01T00:00:00Z"),
            make_post("new", publish_date="2024-06-01T00:00:00Z"),
            make_post("middle", created_at="2024-01-01T00:00:00Z"),
        ]

        assert [post["slug"] for post in sort_recent(posts)] == ["new", "middle", "old"]

    def test_stable_for_equal_dates(self):
        posts = [make_post("first"), make_post("second"), make_post("third")]

        assert [post["slug"] for post in sort_recent(posts)] == ["first", "second", "third"]

    def test_undated_last(self):
        posts = [make_post("undated", created_at=None), make_post("dated")]

        assert [post["slug"] for post in sort_recent(posts)] == ["dated", "undated"]
