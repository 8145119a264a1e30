"""Unit factors for ISO8601 duration conversion."""

NANOSECOND = 1
MICROSECOND = 1000 * NANOSECOND
MILLISECOND = 1000 * MICROSECOND
SECOND = 1000 * MILLISECOND
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE

DAY = 24 * HOUR
"""One day, always 24 hours."""

WEEK = 7 * DAY

YEAR = 365 * DAY
"""One year, always 365 days. Leap years and calendars are ignored."""

MAX_DURATION = 2**63 - 1
"""Largest duration representable as a signed 64-bit nanosecond count."""
