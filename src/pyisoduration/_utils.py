"""Validation and numeric helpers."""

from __future__ import annotations

import re

from pyisoduration._constants import MAX_DURATION
from pyisoduration._errors import ERR_MSG_BAD_FORMAT, BadFormatError

DIGITS_RE = re.compile(r"[0-9]+")

FRACTION_SEPARATORS = ".,"


def parse_decimal(value: str) -> tuple[int, float, bool]:
    """Split a decimal such as ``"1.5"`` or ``"1,5"`` into its parts.

    Returns (whole, frac, has_fraction), where ``0 <= frac <= 1``. The
    fraction only reaches 1.0 when float conversion rounds up a long run
    of nines.
    """
    sep = next((i for i, ch in enumerate(value) if ch in FRACTION_SEPARATORS), -1)
    if sep == -1:
        return _parse_whole(value), 0.0, False

    whole, fraction = value[:sep], value[sep + 1 :]
    if not DIGITS_RE.fullmatch(fraction):
        raise BadFormatError(
            ERR_MSG_BAD_FORMAT,
            f"invalid fractional part in number: {value!r}",
        )
    return _parse_whole(whole), float("0." + fraction), True


def _parse_whole(digits: str) -> int:
    if not DIGITS_RE.fullmatch(digits):
        raise BadFormatError(
            ERR_MSG_BAD_FORMAT,
            f"invalid integer part in number: {digits!r}",
        )
    whole = int(digits)
    if whole > MAX_DURATION:
        raise BadFormatError(
            ERR_MSG_BAD_FORMAT,
            f"integer {digits} exceeds limit {MAX_DURATION}",
        )
    return whole


def validate_length(text: str, max_length: int) -> None:
    """Reject duration strings longer than max_length."""
    if len(text) > max_length:
        raise BadFormatError(
            ERR_MSG_BAD_FORMAT,
            f"input length {len(text)} exceeds limit {max_length}",
        )
