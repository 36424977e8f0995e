"""Calendar periods used as curve tenors and volatility axis points.

Periods compare the way QuantLib compares them: years fold into months and
weeks into days, so ``1Y == 12M`` and ``2W == 14D``.  Month-based and
day-based periods are ordered through their day ranges (a month spans 28 to
31 days, a year 365 to 366); pairs whose ranges overlap cannot be ordered.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from functools import total_ordering

import QuantLib as ql


class TimeUnit(str, Enum):
    """Unit of a period."""
    days = "D"
    weeks = "W"
    months = "M"
    years = "Y"


_TOKEN = re.compile(r"(\d+)\s*([DWMY])", re.IGNORECASE)
_FULL = re.compile(r"^(?:\s*\d+\s*[DWMY])+\s*$", re.IGNORECASE)

_QL_UNITS = {
    TimeUnit.days: ql.Days,
    TimeUnit.weeks: ql.Weeks,
    TimeUnit.months: ql.Months,
    TimeUnit.years: ql.Years,
}

# (min, max) days per unit
_DAY_RANGE = {
    TimeUnit.days: (1, 1),
    TimeUnit.weeks: (7, 7),
    TimeUnit.months: (28, 31),
    TimeUnit.years: (365, 366),
}


@total_ordering
@dataclass(frozen=True, eq=False)
class Period:
    length: int
    unit: TimeUnit

    def _canonical(self) -> tuple[int, str]:
        if self.unit is TimeUnit.years:
            return self.length * 12, TimeUnit.months.value
        if self.unit is TimeUnit.weeks:
            return self.length * 7, TimeUnit.days.value
        return self.length, self.unit.value

    def _day_range(self) -> tuple[int, int]:
        low, high = _DAY_RANGE[self.unit]
        return self.length * low, self.length * high

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Period):
            return NotImplemented
        return self._canonical() == other._canonical()

    def __hash__(self) -> int:
        return hash(self._canonical())

    def __lt__(self, other: Period) -> bool:
        """Raises ValueError when a month-based and a day-based period overlap."""
        if not isinstance(other, Period):
            return NotImplemented
        if self.length == 0:
            return other.length > 0
        if other.length == 0:
            return False

        mine, theirs = self._canonical(), other._canonical()
        if mine[1] == theirs[1]:
            return mine[0] < theirs[0]

        low, high = self._day_range()
        other_low, other_high = other._day_range()
        if high < other_low:
            return True
        if low > other_high:
            return False
        raise ValueError(f"undecidable comparison between {self} and {other}")

    def __str__(self) -> str:
        return f"{self.length}{self.unit.value}"

    def __repr__(self) -> str:
        return f"Period('{self}')"

    def to_quantlib(self) -> ql.Period:
        return ql.Period(self.length, _QL_UNITS[self.unit])


def parse_period(text: str) -> Period:
    """Parse ``"6M"``, ``"1Y"``, ``"10D"`` or a compound form like ``"1Y6M"``.

    Raises ValueError when the text is not a period or mixes month-based and
    day-based units.
    """
    if text is None or not _FULL.match(text):
        raise ValueError(f"invalid period '{text}'")

    tokens = [(int(n), TimeUnit(u.upper())) for n, u in _TOKEN.findall(text)]
    if len(tokens) == 1:
        return Period(*tokens[0])

    months = sum(
        n * 12 if u is TimeUnit.years else n
        for n, u in tokens
        if u in (TimeUnit.years, TimeUnit.months)
    )
    days = sum(
        n * 7 if u is TimeUnit.weeks else n
        for n, u in tokens
        if u in (TimeUnit.weeks, TimeUnit.days)
    )
    if months and days:
        raise ValueError(f"invalid period '{text}': cannot mix months and days")
    if days:
        return Period(days, TimeUnit.days)
    return Period(months, TimeUnit.months)
