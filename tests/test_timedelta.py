"""timedelta interop tests."""

from datetime import timedelta

import pytest

from pyisoduration import (
    DAY,
    MICROSECOND,
    NoMonthError,
    from_timedelta,
    parse_timedelta,
    to_timedelta,
)


class TestFromTimedelta:
    def test_days(self):
        assert from_timedelta(timedelta(days=2)) == 2 * DAY

    def test_microseconds(self):
        assert from_timedelta(timedelta(microseconds=7)) == 7 * MICROSECOND

    def test_negative(self):
        assert from_timedelta(timedelta(microseconds=-1)) == -MICROSECOND


class TestToTimedelta:
    def test_exact(self):
        assert to_timedelta(DAY + 3 * MICROSECOND) == timedelta(days=1, microseconds=3)

    def test_truncates_nanoseconds(self):
        assert to_timedelta(1999) == timedelta(microseconds=1)

    def test_negative_truncates_toward_zero(self):
        assert to_timedelta(-1999) == timedelta(microseconds=-1)


class TestParseTimedelta:
    def test_weeks(self):
        assert parse_timedelta("P2W") == timedelta(weeks=2)

    def test_full(self):
        assert parse_timedelta("P1Y2DT3H4M5.5S") == timedelta(
            days=367, hours=3, minutes=4, seconds=5, milliseconds=500
        )

    def test_errors_propagate(self):
        with pytest.raises(NoMonthError):
            parse_timedelta("P1M")
