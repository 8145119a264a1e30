"""Duration units in ISO8601 designator order."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from pyisoduration._constants import DAY, HOUR, MINUTE, SECOND, WEEK, YEAR


class Unit(enum.StrEnum):
    YEAR = "year"
    MONTH = "month"
    WEEK = "week"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"


UNIT_NANOS: dict[Unit, int] = {
    Unit.YEAR: YEAR,
    Unit.WEEK: WEEK,
    Unit.DAY: DAY,
    Unit.HOUR: HOUR,
    Unit.MINUTE: MINUTE,
    Unit.SECOND: SECOND,
}
"""Nanoseconds per unit. Months have no fixed length and are absent."""


@dataclass(frozen=True)
class UnitComponent:
    """A single numeric element of a duration string, e.g. ``1.5`` in ``PT1.5H``.

    ``frac`` is normally in ``[0, 1)``, but a fraction with more digits than a
    double can hold (``0.99999999999999999999``) rounds up to exactly ``1.0``.
    """

    unit: Unit
    whole: int
    frac: float = 0.0
    has_fraction: bool = False

    @property
    def nanos(self) -> int:
        """Nanoseconds contributed by this element.

        The fractional part is scaled in floating point and rounded to the
        nearest nanosecond.
        """
        factor = UNIT_NANOS[self.unit]
        total = self.whole * factor
        if self.frac:
            total += round(self.frac * factor)
        return total
