"""ISO8601 duration parser - Lark grammar plus an Interpreter that accumulates nanoseconds."""

from __future__ import annotations

from lark import Lark, Tree
from lark.exceptions import UnexpectedInput
from lark.visitors import Interpreter

from pyisoduration._constants import MAX_DURATION
from pyisoduration._errors import (
    ERR_MSG_BAD_FORMAT,
    ERR_MSG_NO_MONTH,
    BadFormatError,
    NoMonthError,
)
from pyisoduration._units import Unit, UnitComponent
from pyisoduration._utils import parse_decimal, validate_length

# Designators are case-sensitive and must appear in this order. The time
# designator "T" may be followed by nothing; that case is rejected after
# parsing because it carries no elements.
DURATION_GRAMMAR = r"""
duration: "P" year? month? week? day? _time?
_time: "T" hour? minute? second?

year: NUMBER "Y"
month: NUMBER "M"
week: NUMBER "W"
day: NUMBER "D"
hour: NUMBER "H"
minute: NUMBER "M"
second: NUMBER "S"

NUMBER: /[0-9]+(?:[.,][0-9]+)?/
"""

_lark = Lark(DURATION_GRAMMAR, start="duration", parser="lalr")


class DurationParser(Interpreter):
    """Parses ISO8601 duration strings into nanosecond counts.

    Instances hold configuration only, so one parser may be shared
    between threads.
    """

    def __init__(self, max_length: int | None = None) -> None:
        self._max_length = max_length

    def parse(self, text: str) -> int:
        """Parse ``text`` and return the duration in nanoseconds.

        Raises:
            BadFormatError: If the text is not a supported duration.
            NoMonthError: If the text contains a month element.
        """
        stripped = text.strip()
        if self._max_length is not None:
            validate_length(stripped, self._max_length)
        try:
            tree = _lark.parse(stripped)
        except UnexpectedInput as e:
            raise BadFormatError(
                ERR_MSG_BAD_FORMAT,
                f"cannot parse duration: {stripped!r}",
                wrapped=e,
            ) from e
        return self.visit(tree)

    # ---- Top-level entry ----

    def duration(self, tree: Tree) -> int:
        total = 0
        num_elems = 0
        week_seen = False
        fraction_unit: Unit | None = None

        for node in tree.children:
            component: UnitComponent = self.visit(node)

            # A fractional element must be the last element in the string
            if fraction_unit is not None:
                raise BadFormatError(
                    ERR_MSG_BAD_FORMAT,
                    f"{component.unit} element follows fractional {fraction_unit} element",
                )
            if component.has_fraction:
                fraction_unit = component.unit

            if component.unit is Unit.MONTH:
                raise NoMonthError(
                    ERR_MSG_NO_MONTH,
                    "month elements have no fixed duration",
                )

            total += component.nanos
            if total > MAX_DURATION:
                raise BadFormatError(
                    ERR_MSG_BAD_FORMAT,
                    f"duration exceeds limit {MAX_DURATION}ns",
                )

            num_elems += 1
            if component.unit is Unit.WEEK:
                week_seen = True

        if num_elems == 0:
            raise BadFormatError(
                ERR_MSG_BAD_FORMAT,
                "duration has no elements",
            )

        # Weeks cannot be combined with any other unit
        if week_seen and num_elems > 1:
            raise BadFormatError(
                ERR_MSG_BAD_FORMAT,
                "week element combined with other elements",
            )

        return total

    # ---- Elements ----

    def year(self, tree: Tree) -> UnitComponent:
        return self._component(Unit.YEAR, tree)

    def month(self, tree: Tree) -> UnitComponent:
        return self._component(Unit.MONTH, tree)

    def week(self, tree: Tree) -> UnitComponent:
        return self._component(Unit.WEEK, tree)

    def day(self, tree: Tree) -> UnitComponent:
        return self._component(Unit.DAY, tree)

    def hour(self, tree: Tree) -> UnitComponent:
        return self._component(Unit.HOUR, tree)

    def minute(self, tree: Tree) -> UnitComponent:
        return self._component(Unit.MINUTE, tree)

    def second(self, tree: Tree) -> UnitComponent:
        return self._component(Unit.SECOND, tree)

    def _component(self, unit: Unit, tree: Tree) -> UnitComponent:
        whole, frac, has_fraction = parse_decimal(str(tree.children[0]))
        return UnitComponent(unit, whole, frac, has_fraction)
