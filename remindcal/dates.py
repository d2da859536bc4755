"""
Date model for reminders.

Two representations are used: a yearless ``Recurring`` day/month pair for
yearly occasions, and a year-bound ``Fixed`` date. Both are immutable and
ordered lexicographically from the largest unit down.

Text forms are comma separated and always start with the day::

    25,12       -> Recurring 25/12
    9,4,2023    -> Fixed 09/04/2023
"""

import datetime
import re
from typing import Annotated, List, Optional, Sequence, Union

from pydantic import Field, ValidationError
from pydantic.dataclasses import dataclass

from .errors import ParseError

Day = Annotated[int, Field(ge=1, le=31)]
Month = Annotated[int, Field(ge=1, le=12)]

_UNSIGNED = re.compile(r"\+?\d+", re.ASCII)
_SIGNED = re.compile(r"[+-]?\d+", re.ASCII)


def split_slots(value: str, sep: str, required: Sequence[str], optional: Sequence[str] = ()) -> List[Optional[str]]:
    """
    Splits `value` on `sep` into exactly the named slots, each trimmed.

    Every name in `required` must be present and no slot beyond
    `required + optional` may appear. Absent optional slots come back as None.
    """
    parts = value.split(sep)
    if len(parts) < len(required):
        raise ParseError(f"missing '{required[len(parts)]}' slot")
    if len(parts) > len(required) + len(optional):
        raise ParseError(f"extra '{sep}' found")
    slots: List[Optional[str]] = [part.strip() for part in parts]
    slots.extend([None] * (len(required) + len(optional) - len(parts)))
    return slots


def _parse_int(text: str, name: str, signed: bool = False) -> int:
    pattern = _SIGNED if signed else _UNSIGNED
    if not pattern.fullmatch(text):
        raise ParseError(f"failed to parse {name}")
    return int(text)


def is_leap(year: int) -> bool:
    if year % 400 == 0:
        return True
    if year % 100 == 0:
        return False
    return year % 4 == 0


def last_day(month: int, year: int) -> int:
    if month in (4, 6, 9, 11):
        return 30
    if month == 2:
        return 29 if is_leap(year) else 28
    return 31


@dataclass(frozen=True, order=True)
class Recurring:
    """
    A day of a month with no year.

    Day and month are range checked but not checked against each other:
    31/04 is accepted and only rolls over once date arithmetic touches it.
    """

    month: Month
    day: Day

    def __str__(self) -> str:
        return f"{self.day:02}/{self.month:02}"

    @classmethod
    def parse(cls, value: str) -> "Recurring":
        day, month = split_slots(value, ",", ("day", "month"))
        day = _parse_int(day, "day")
        month = _parse_int(month, "month")
        try:
            return cls(month=month, day=day)
        except ValidationError as err:
            field = err.errors()[0]["loc"][0]
            raise ParseError(f"{field} out of range") from err

    @classmethod
    def now(cls) -> "Recurring":
        today = datetime.date.today()
        return cls(month=today.month, day=today.day)

    def in_year(self, year: int) -> "Fixed":
        return Fixed(year=year, date=self)

    def next_match(self, today: Optional["Fixed"] = None) -> "Fixed":
        if today is None:
            today = Fixed.now()
        return self.in_year(today.year).next_match(today)


LEAP_DAY = Recurring(month=2, day=29)


def _day_number(year: int, month: int, day: int) -> int:
    # proleptic Gregorian, day 1 is 01/01/0001
    y = year - 1
    days = y * 365 + y // 4 - y // 100 + y // 400
    days += sum(last_day(m, year) for m in range(1, month))
    return days + day


def _step_number(fixed: "Fixed", as_target: bool) -> int:
    """
    Day number of `fixed` as seen when stepping with `Fixed.next`.

    A day past the end of its month is one step away from day 1 of the next
    month: it starts like the last day of its month, and is reached like
    day 1 of the next one.
    """
    last = last_day(fixed.month, fixed.year)
    if fixed.day <= last:
        return _day_number(fixed.year, fixed.month, fixed.day)
    return _day_number(fixed.year, fixed.month, last) + (1 if as_target else 0)


@dataclass(frozen=True, order=True)
class Fixed:
    """A complete calendar date. The year may be negative."""

    year: int
    date: Recurring

    def __str__(self) -> str:
        return f"{self.date}/{self.year:04}"

    @property
    def day(self) -> int:
        return self.date.day

    @property
    def month(self) -> int:
        return self.date.month

    @classmethod
    def from_parts(cls, day: int, month: int, year: int) -> "Fixed":
        return cls(year=year, date=Recurring(month=month, day=day))

    @classmethod
    def parse(cls, value: str) -> "Fixed":
        day, month, year = split_slots(value, ",", ("day", "month", "year"))
        date = Recurring.parse(f"{day},{month}")
        return cls(year=_parse_int(year, "year", signed=True), date=date)

    @classmethod
    def now(cls) -> "Fixed":
        today = datetime.date.today()
        return cls.from_parts(today.day, today.month, today.year)

    def next(self) -> "Fixed":
        """Returns the following calendar day."""
        day, month, year = self.day + 1, self.month, self.year
        if day > last_day(month, year):
            day = 1
            month += 1
        if month > 12:
            month = 1
            year += 1
        return Fixed.from_parts(day, month, year)

    def next_match(self, today: Optional["Fixed"] = None) -> "Fixed":
        """
        Returns the only date in [today, today + 1 year) with the same day
        and month. 29/02 becomes 28/02 when that year has no leap day.
        """
        if today is None:
            today = Fixed.now()
        candidate = self.date.in_year(today.year)
        if candidate < today:
            candidate = self.date.in_year(today.year + 1)
        if candidate.date == LEAP_DAY and not is_leap(candidate.year):
            candidate = Fixed.from_parts(28, 2, candidate.year)
        return candidate

    def year_diff(self, target: "Fixed") -> int:
        """Years from self to target, e.g. an age when target is the next match."""
        return target.year - self.year

    def days_to(self, target: "Fixed") -> int:
        """Number of `next` steps from self until target is reached or passed."""
        if target < self:
            raise ValueError(f"{self} is after {target}")
        if target == self:
            return 0
        return _step_number(target, as_target=True) - _step_number(self, as_target=False)


AnyDate = Union[Recurring, Fixed]


def parse_any_date(value: str) -> AnyDate:
    """Parses a date that may or may not carry a year."""
    try:
        return Recurring.parse(value)
    except ParseError:
        pass
    try:
        return Fixed.parse(value)
    except ParseError:
        pass
    raise ParseError("no date format matched")
