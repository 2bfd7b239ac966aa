"""Timestamps - epoch-millisecond conversion and UTC normalization.

Invariants:
    - Every datetime leaving this module is timezone-aware UTC
    - Naive datetimes are read as UTC (SQLite drops tzinfo on round-trip)
    - Conversions are exact to the millisecond (timedelta arithmetic, no floats)
"""

from datetime import datetime, timedelta, timezone

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MILLI = timedelta(milliseconds=1)


def ensure_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes; convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def from_epoch_millis(millis: int) -> datetime | None:
    """Epoch milliseconds to aware UTC datetime. None when outside datetime range."""
    try:
        return EPOCH + timedelta(milliseconds=millis)
    except OverflowError:
        return None


def to_epoch_millis(value: datetime) -> int:
    return (ensure_utc(value) - EPOCH) // _ONE_MILLI
