"""Timestamps - epoch millisecond conversion and UTC normalization."""

from datetime import datetime, timedelta, timezone

from app.core.timestamps import ensure_utc, from_epoch_millis, to_epoch_millis


def test_round_trip_is_exact_to_the_millisecond():
    millis = 1_262_304_000_123
    converted = from_epoch_millis(millis)
    assert converted == datetime(2010, 1, 1, 0, 0, 0, 123_000, tzinfo=timezone.utc)
    assert to_epoch_millis(converted) == millis


def test_negative_millis_are_before_epoch():
    assert from_epoch_millis(-1) == datetime(1969, 12, 31, 23, 59, 59, 999_000, tzinfo=timezone.utc)


def test_out_of_range_millis_return_none():
    assert from_epoch_millis(10**20) is None


def test_ensure_utc_handles_naive_and_offset_datetimes():
    assert ensure_utc(datetime(2010, 1, 1)).tzinfo is timezone.utc
    plus_two = datetime(2010, 1, 1, 2, tzinfo=timezone(timedelta(hours=2)))
    assert ensure_utc(plus_two) == datetime(2010, 1, 1, tzinfo=timezone.utc)
    assert to_epoch_millis(datetime(1970, 1, 1)) == 0
