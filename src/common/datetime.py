"""Datetime utilities."""

from datetime import date, datetime, time


def to_datetime(value) -> datetime:
    """Coerce a datetime, date or ISO string into a datetime.

    Dates become midnight of that day. ISO strings may end in "Z".
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            raise ValueError("empty datetime string")
        return datetime.fromisoformat(text.replace("Z", "+00:00"))
    raise ValueError(f"Cannot convert {type(value).__name__} to datetime")


def now_like(reference: datetime) -> datetime:
    """Current time, aware or naive to match `reference`."""
    return datetime.now(reference.tzinfo)


def match_awareness(value: datetime, reference: datetime) -> datetime:
    """Return `value` aware or naive to match `reference` so the two compare.

    An aware value against a naive reference is converted to local time and
    made naive. A naive value against an aware reference takes its tzinfo.
    """
    if reference.tzinfo is None and value.tzinfo is not None:
        return value.astimezone().replace(tzinfo=None)
    if reference.tzinfo is not None and value.tzinfo is None:
        return value.replace(tzinfo=reference.tzinfo)
    return value
