"""Timestamp helpers."""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def to_iso_millis(value: datetime) -> str:
    """Format a datetime the way JavaScript's ``Date.toJSON`` does.

    Examples:
        >>> to_iso_millis(datetime(2024, 5, 1, 12, 0, 0, 123456, tzinfo=timezone.utc))
        '2024-05-01T12:00:00.123Z'
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")
