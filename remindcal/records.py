"""
Record grammar.

Every record file line has the shape ``kind=body``::

    person=first_name, last_name, nickname; birthday; saint_day; wedding_day
    holiday=description; begin[; end]
    special=description; date

Slots are split strictly: a missing or an extra delimiter is an error, and
surrounding whitespace is ignored. Each record turns into one or more
`Event` entries through `Record.into_events`.
"""

import logging
from abc import abstractmethod
from typing import Dict, List, Optional, Tuple, Type, Union

from pydantic import BaseModel, ConfigDict
from pydantic.dataclasses import dataclass

from .dates import AnyDate, Fixed, Recurring, parse_any_date, split_slots
from .errors import ParseError, SpanOrderError
from .models import Event, EventKind

logger = logging.getLogger(__name__)


class Record(BaseModel):
    model_config = ConfigDict(frozen=True)

    @classmethod
    @abstractmethod
    def parse(cls, value: str) -> "Record":
        ...

    @abstractmethod
    def into_events(self, today: Fixed) -> List[Event]:
        """Expands the record into dated events relative to `today`."""
        ...


# --- PERSON ---

def parse_name(value: str) -> str:
    """
    Resolves the display name from ``first_name, last_name, nickname``.

    A nickname wins; otherwise the first name is required and the last name
    is appended when present.
    """
    first_name, last_name, nickname = split_slots(value, ",", ("first_name", "last_name", "nickname"))
    if nickname:
        return nickname
    if not first_name:
        raise ParseError("first name or nickname required")
    if not last_name:
        return first_name
    return f"{first_name} {last_name}"


def next_and_count(source: AnyDate, today: Fixed) -> Tuple[Fixed, Optional[int]]:
    """Next occurrence of `source`, and the years elapsed when it has a year."""
    if isinstance(source, Recurring):
        return source.next_match(today), None
    if isinstance(source, Fixed):
        upcoming = source.next_match(today)
        return upcoming, source.year_diff(upcoming)
    raise TypeError(f"unsupported date: {source!r}")


class Person(Record):
    name: str
    birthday: Optional[AnyDate] = None
    saint_day: Optional[Recurring] = None
    wedding_day: Optional[AnyDate] = None

    @classmethod
    def parse(cls, value: str) -> "Person":
        name, birthday, saint_day, wedding_day = split_slots(
            value, ";", ("name", "birthday", "saint_day", "wedding_day")
        )
        return cls(
            name=parse_name(name),
            birthday=parse_any_date(birthday) if birthday else None,
            saint_day=Recurring.parse(saint_day) if saint_day else None,
            wedding_day=parse_any_date(wedding_day) if wedding_day else None,
        )

    def _counted_event(self, kind: EventKind, source: AnyDate, unit: str, today: Fixed) -> Event:
        date, count = next_and_count(source, today)
        description = self.name if count is None else f"{self.name} ({unit} {count})"
        return Event(kind=kind, date=date, description=description)

    def into_events(self, today: Fixed) -> List[Event]:
        events = []
        if self.birthday is not None:
            events.append(self._counted_event(EventKind.BIRTHDAY, self.birthday, "age", today))
        if self.saint_day is not None:
            events.append(Event(kind=EventKind.SAINT_DAY, date=self.saint_day.next_match(today), description=self.name))
        if self.wedding_day is not None:
            events.append(self._counted_event(EventKind.WEDDING, self.wedding_day, "year", today))
        return events


# --- HOLIDAY ---

@dataclass(frozen=True)
class RecurringHoliday:
    date: Recurring


@dataclass(frozen=True)
class FixedHoliday:
    date: Fixed


@dataclass(frozen=True)
class SpanHoliday:
    begin: Fixed
    end: Fixed


HolidayKind = Union[RecurringHoliday, FixedHoliday, SpanHoliday]


class Holiday(Record):
    description: str
    kind: HolidayKind

    @classmethod
    def parse(cls, value: str) -> "Holiday":
        description, begin, end = split_slots(value, ";", ("description", "begin"), ("end",))
        if end is not None:
            first, last = Fixed.parse(begin), Fixed.parse(end)
            if first > last:
                raise SpanOrderError("begin is after end")
            kind = FixedHoliday(date=first) if first == last else SpanHoliday(begin=first, end=last)
            return cls(description=description, kind=kind)
        try:
            return cls(description=description, kind=RecurringHoliday(date=Recurring.parse(begin)))
        except ParseError:
            pass
        try:
            return cls(description=description, kind=FixedHoliday(date=Fixed.parse(begin)))
        except ParseError:
            pass
        raise ParseError("no holiday format matched")

    def into_events(self, today: Fixed) -> List[Event]:
        kind = self.kind
        if isinstance(kind, (RecurringHoliday, FixedHoliday)):
            return [Event(kind=EventKind.HOLIDAY, date=kind.date.next_match(today), description=self.description)]
        if isinstance(kind, SpanHoliday):
            return self._span_events(kind)
        raise TypeError(f"unsupported holiday kind: {kind!r}")

    def _span_events(self, span: SpanHoliday) -> List[Event]:
        # one event per day, counting down to 0 on the last day
        events = []
        remaining = span.begin.days_to(span.end) + 1
        current = span.begin
        while current <= span.end:
            remaining -= 1
            description = f"{self.description} ({remaining} days remaining)"
            events.append(Event(kind=EventKind.HOLIDAY, date=current, description=description))
            current = current.next()
        return events


# --- SPECIAL ---

class Special(Record):
    description: str
    date: Fixed

    @classmethod
    def parse(cls, value: str) -> "Special":
        description, date = split_slots(value, ";", ("description", "date"))
        return cls(description=description, date=Fixed.parse(date))

    def into_events(self, today: Fixed) -> List[Event]:
        return [Event(kind=EventKind.SPECIAL, date=self.date, description=self.description)]


RECORD_TYPES: Dict[str, Type[Record]] = {
    "person": Person,
    "holiday": Holiday,
    "special": Special,
}


def parse_line(line: str) -> Record:
    """Parses a sanitized ``kind=body`` line into its record."""
    kind, body = split_slots(line, "=", ("event kind", "event"))
    record_type = RECORD_TYPES.get(kind)
    if record_type is None:
        raise ParseError("no event kind matched")
    record = record_type.parse(body)
    logger.debug("parsed %s record: %r", kind, record)
    return record
