"""Helpers for timezone-aware timestamps."""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def ensure_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC and convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_timestamp(value) -> datetime:
    """Parse an ISO-8601 string (``Z`` suffix allowed) into aware UTC.

    Args:
        value: ISO string or datetime from a storage backend.

    Returns:
        datetime: Aware UTC timestamp.
    """
    if isinstance(value, datetime):
        return ensure_utc(value)
    text = str(value).strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return ensure_utc(datetime.fromisoformat(text))


def format_timestamp(value: datetime) -> str:
    """Format a timestamp as an ISO-8601 UTC string with a ``Z`` suffix."""
    return ensure_utc(value).isoformat().replace("+00:00", "Z")


__all__ = ["utc_now", "ensure_utc", "parse_timestamp", "format_timestamp"]
