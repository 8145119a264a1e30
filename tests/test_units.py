"""Unit constant and component tests."""

import pytest

from pyisoduration import DAY, HOUR, MINUTE, SECOND, WEEK, YEAR, Unit
from pyisoduration._constants import MAX_DURATION
from pyisoduration._units import UNIT_NANOS, UnitComponent


class TestConstants:
    def test_day(self):
        assert DAY == 24 * HOUR

    def test_week(self):
        assert WEEK == 7 * DAY

    def test_year(self):
        assert YEAR == 365 * DAY

    def test_second_in_nanoseconds(self):
        assert SECOND == 1_000_000_000

    def test_max_duration_is_int64_max(self):
        assert MAX_DURATION == 9_223_372_036_854_775_807


class TestUnit:
    def test_grammar_order(self):
        assert list(Unit) == [
            Unit.YEAR,
            Unit.MONTH,
            Unit.WEEK,
            Unit.DAY,
            Unit.HOUR,
            Unit.MINUTE,
            Unit.SECOND,
        ]

    def test_str_value(self):
        assert str(Unit.MINUTE) == "minute"

    def test_month_has_no_factor(self):
        assert Unit.MONTH not in UNIT_NANOS

    def test_factors(self):
        assert UNIT_NANOS[Unit.HOUR] == HOUR
        assert UNIT_NANOS[Unit.MINUTE] == MINUTE


class TestUnitComponent:
    def test_whole(self):
        assert UnitComponent(Unit.DAY, 3).nanos == 3 * DAY

    def test_fraction(self):
        assert UnitComponent(Unit.HOUR, 1, 0.5, True).nanos == HOUR + 30 * MINUTE

    def test_fraction_rounds_to_nanosecond(self):
        assert UnitComponent(Unit.SECOND, 0, 0.123456789, True).nanos == 123_456_789

    def test_frozen(self):
        component = UnitComponent(Unit.DAY, 1)
        with pytest.raises(AttributeError):
            component.whole = 2
