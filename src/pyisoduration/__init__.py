"""pyisoduration - Parse and format ISO8601 durations as nanosecond counts."""

from __future__ import annotations

try:
    from pyisoduration._version import __version__
except ModuleNotFoundError:  # editable install without VCS metadata
    __version__ = "0.0.0.dev0"

from datetime import timedelta

from pyisoduration._constants import (
    DAY,
    HOUR,
    MICROSECOND,
    MILLISECOND,
    MINUTE,
    NANOSECOND,
    SECOND,
    WEEK,
    YEAR,
)
from pyisoduration._errors import (
    BadFormatError,
    DurationError,
    NoMonthError,
    NoNegativeError,
)
from pyisoduration._formatter import format_nanos
from pyisoduration._parser import DurationParser
from pyisoduration._timedelta import from_timedelta, to_timedelta
from pyisoduration._units import Unit

__all__ = [
    "parse",
    "parse_timedelta",
    "format",
    "format_nanos",
    "from_timedelta",
    "to_timedelta",
    "DurationParser",
    "Unit",
    "DurationError",
    "BadFormatError",
    "NoMonthError",
    "NoNegativeError",
    "NANOSECOND",
    "MICROSECOND",
    "MILLISECOND",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
    "WEEK",
    "YEAR",
]

_parser = DurationParser()


def parse(text: str, *, max_length: int | None = None) -> int:
    """Parse an ISO8601 duration string into nanoseconds.

    Args:
        text: The duration, e.g. ``"P1Y2DT3H4M5S"``. Surrounding whitespace
            is ignored.
        max_length: Maximum length of the trimmed input. Unlimited by default.

    Returns:
        The duration as a non-negative nanosecond count.

    Raises:
        BadFormatError: If the text is not a valid duration, combines weeks
            with other units, or places a fraction anywhere but the last element.
        NoMonthError: If the text contains a month element.
    """
    parser = _parser
    if max_length is not None:
        parser = DurationParser(max_length=max_length)
    return parser.parse(text)


def parse_timedelta(text: str, *, max_length: int | None = None) -> timedelta:
    """Parse an ISO8601 duration string into a timedelta.

    Sub-microsecond precision is truncated. Raises the same errors as parse().
    """
    return to_timedelta(parse(text, max_length=max_length))


def format(value: int | timedelta) -> str:
    """Format a duration as an ISO8601 string.

    Args:
        value: A nanosecond count (int) or a timedelta.

    Returns:
        The ISO8601 representation, e.g. ``"P10DT1H1M1.001S"``.

    Raises:
        NoNegativeError: If the duration is negative.
        TypeError: If value is neither an int nor a timedelta.
    """
    if isinstance(value, timedelta):
        return format_nanos(from_timedelta(value))
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected int nanoseconds or timedelta, got {type(value).__name__}")
    return format_nanos(value)
