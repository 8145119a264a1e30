"""Conversions between nanosecond counts and datetime.timedelta."""

from __future__ import annotations

from datetime import timedelta

from pyisoduration._constants import MICROSECOND, SECOND

_SECONDS_PER_DAY = 86_400


def from_timedelta(td: timedelta) -> int:
    """Return the exact nanosecond count of a timedelta."""
    seconds = td.days * _SECONDS_PER_DAY + td.seconds
    return seconds * SECOND + td.microseconds * MICROSECOND


def to_timedelta(nanos: int) -> timedelta:
    """Convert nanoseconds to a timedelta, truncating below microsecond precision."""
    micros = abs(nanos) // MICROSECOND
    return timedelta(microseconds=micros if nanos >= 0 else -micros)
