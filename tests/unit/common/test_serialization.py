"""Tests for common.serialization module."""

from dataclasses import dataclass
from datetime import date, datetime, timezone

from common.serialization import serialize_dataclass


@dataclass
class SampleData:
    name: str
    value: int


@dataclass
class SampleWithDatetime:
    name: str
    created_at: datetime
    day: date


@dataclass
class SampleWithCollections:
    tags: tuple
    metadata: dict


class TestSerializeDataclass:
    def test_basic_dataclass_to_dict(self) -> None:
        obj = SampleData(name="test", value=42)
        assert serialize_dataclass(obj) == {"name": "test", "value": 42}

    def test_datetime_and_date_fields_to_iso_string(self) -> None:
        dt = datetime(2026, 2, 10, 0, 0, 0, tzinfo=timezone.utc)
        obj = SampleWithDatetime(name="test", created_at=dt, day=date(2026, 2, 11))
        result = serialize_dataclass(obj)
        assert result["created_at"] == "2026-02-10T00:00:00+00:00"
        assert result["day"] == "2026-02-11"

    def test_tuples_become_lists(self) -> None:
        obj = SampleWithCollections(tags=("a", "b"), metadata={})
        assert serialize_dataclass(obj)["tags"] == ["a", "b"]

    def test_nested_dict_datetime_handling(self) -> None:
        dt = datetime(2026, 6, 15, 8, 30, 0)
        obj = SampleWithCollections(tags=(), metadata={"updated_at": dt})
        assert serialize_dataclass(obj)["metadata"]["updated_at"] == "2026-06-15T08:30:00"
