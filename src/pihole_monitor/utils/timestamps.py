"""Timestamp normalization utilities."""

from datetime import datetime, timezone
from typing import Any, Optional

from dateutil import parser as dateutil_parser


def normalize_timestamp(value: Any) -> datetime:
    """Convert various timestamp formats to a UTC datetime.

    Handles:
    - int/float: Unix timestamp (auto-detects milliseconds vs seconds)
    - str: ISO format or other parseable formats via dateutil
    - datetime: converted to UTC, naive values are assumed to be UTC

    Raises:
        ValueError: If value cannot be parsed as a timestamp

    Example:
        >>> normalize_timestamp("2026-01-12T20:00:00.000Z")
        datetime.datetime(2026, 1, 12, 20, 0, tzinfo=datetime.timezone.utc)
    """
    if isinstance(value, bool):
        raise ValueError(f"Cannot parse timestamp: {value!r}")
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, (int, float)):
        # Timestamps > 1e12 are milliseconds (after year 2001)
        if value > 1e12:
            value = value / 1000
        return datetime.fromtimestamp(value, tz=timezone.utc)
    elif isinstance(value, str):
        try:
            dt = dateutil_parser.isoparse(value)
        except ValueError:
            dt = dateutil_parser.parse(value)
    else:
        raise ValueError(f"Cannot parse timestamp: {value!r} (type: {type(value).__name__})")

    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def minutes_since(then: Optional[datetime], now: datetime) -> Optional[float]:
    """Minutes elapsed from ``then`` to ``now``; None when ``then`` is missing."""
    if then is None:
        return None
    return (normalize_timestamp(now) - normalize_timestamp(then)).total_seconds() / 60.0
