"""Greedy ISO8601 duration formatting."""

from __future__ import annotations

from io import StringIO

from pyisoduration._constants import (
    DAY,
    HOUR,
    MICROSECOND,
    MILLISECOND,
    MINUTE,
    SECOND,
    YEAR,
)
from pyisoduration._errors import ERR_MSG_NO_NEGATIVE, NoNegativeError

# Weeks are never written; multi-week spans come out as days.
_DATE_UNITS = ((YEAR, "Y"), (DAY, "D"))
_TIME_UNITS = ((HOUR, "H"), (MINUTE, "M"))


def format_nanos(d: int) -> str:
    """Format a non-negative nanosecond count as an ISO8601 duration.

    Uses the fewest designators that reproduce ``d`` exactly. Zero is
    written as ``P0Y``.

    Raises:
        NoNegativeError: If ``d`` is negative.
    """
    if d < 0:
        raise NoNegativeError(ERR_MSG_NO_NEGATIVE, f"duration {d}ns is negative")

    w = StringIO()
    w.write("P")
    if d == 0:
        w.write("0Y")
        return w.getvalue()

    for factor, designator in _DATE_UNITS:
        d = _write_unit(w, d, factor, designator)
        if d == 0:
            return w.getvalue()

    w.write("T")

    for factor, designator in _TIME_UNITS:
        d = _write_unit(w, d, factor, designator)
        if d == 0:
            return w.getvalue()

    _write_seconds(w, d)
    return w.getvalue()


def _write_unit(w: StringIO, d: int, factor: int, designator: str) -> int:
    """Write the whole number of ``factor`` units in ``d`` and return the remainder."""
    count, rest = divmod(d, factor)
    if count >= 1:
        w.write(f"{count}{designator}")
    return rest


def _write_seconds(w: StringIO, d: int) -> None:
    if d % SECOND == 0:
        w.write(f"{d // SECOND}S")
        return

    # Precision follows the coarsest sub-second unit that divides d
    if d % MILLISECOND == 0:
        precision = 3
    elif d % MICROSECOND == 0:
        precision = 6
    else:
        precision = 9
    w.write(f"{d / SECOND:.{precision}f}S")
