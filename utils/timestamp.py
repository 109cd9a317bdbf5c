"""Millisecond timestamp utilities."""

import time
from datetime import datetime, timedelta, timezone

_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_MILLISECOND = timedelta(milliseconds=1)


def now_millis():
    """Current time in milliseconds since Unix epoch."""
    return time.time_ns() // 1_000_000


def to_millis(value):
    """Convert an epoch given as Unix milliseconds or a datetime to Unix milliseconds.

    Naive datetimes are taken as UTC.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        # Floors, before 1970 too
        return (value - _UNIX_EPOCH) // _MILLISECOND
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"epoch must be int milliseconds or datetime, got {type(value).__name__}")
    return value


def format_timestamp(epoch_ms=None):
    """Format timestamp as ISO 8601 with milliseconds."""
    if epoch_ms is None:
        epoch_ms = now_millis()

    dt = datetime.fromtimestamp(epoch_ms / 1000, tz=timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{epoch_ms % 1000:03d}Z"
