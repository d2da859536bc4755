"""Tests for picking the nearest events of each kind."""

from remindcal.dates import Fixed
from remindcal.models import Event, EventKind
from remindcal.selector import add_from, get_next, upcoming


def event(kind, day, month, year, description="x"):
    return Event(kind=kind, date=Fixed.from_parts(day, month, year), description=description)


class TestGetNext:
    def test_ties_keep_order(self, today):
        events = [
            event(EventKind.BIRTHDAY, 1, 12, 2026, "first"),
            event(EventKind.BIRTHDAY, 5, 12, 2026, "later"),
            event(EventKind.BIRTHDAY, 1, 12, 2026, "second"),
        ]
        result = get_next(events, EventKind.BIRTHDAY, today)
        assert [e.description for e in result] == ["first", "second"]

    def test_unique(self, today):
        events = [
            event(EventKind.HOLIDAY, 25, 12, 2026, "Christmas"),
            event(EventKind.HOLIDAY, 31, 10, 2026, "Halloween"),
            event(EventKind.HOLIDAY, 1, 1, 2027, "New Year"),
        ]
        assert [e.description for e in get_next(events, EventKind.HOLIDAY, today)] == ["Halloween"]

    def test_smaller_date_resets_ties(self, today):
        events = [
            event(EventKind.SPECIAL, 5, 11, 2026, "a"),
            event(EventKind.SPECIAL, 5, 11, 2026, "b"),
            event(EventKind.SPECIAL, 1, 11, 2026, "c"),
        ]
        assert [e.description for e in get_next(events, EventKind.SPECIAL, today)] == ["c"]

    def test_today_counts(self, today):
        events = [event(EventKind.SPECIAL, 19, 10, 2026, "now"), event(EventKind.SPECIAL, 20, 10, 2026)]
        assert [e.description for e in get_next(events, EventKind.SPECIAL, today)] == ["now"]

    def test_past_events_ignored(self, today):
        events = [event(EventKind.SPECIAL, 18, 10, 2026), event(EventKind.SPECIAL, 1, 1, 2000)]
        assert get_next(events, EventKind.SPECIAL, today) == []

    def test_other_kinds_ignored(self, today):
        events = [event(EventKind.WEDDING, 1, 11, 2026)]
        assert get_next(events, EventKind.BIRTHDAY, today) == []

    def test_empty(self, today):
        assert get_next([], EventKind.BIRTHDAY, today) == []

    def test_source_untouched(self, today):
        events = [event(EventKind.SPECIAL, 5, 11, 2026), event(EventKind.SPECIAL, 1, 11, 2026)]
        snapshot = list(events)
        get_next(events, EventKind.SPECIAL, today)
        assert events == snapshot


class TestIngestion:
    def test_add_from_appends(self, today):
        events = []
        add_from("holiday=Christmas;25,12", events, today)
        add_from("person=a,,;1,1;2,2;", events, today)
        assert [e.kind for e in events] == [EventKind.HOLIDAY, EventKind.BIRTHDAY, EventKind.SAINT_DAY]

    def test_upcoming_in_display_order(self, today):
        events = []
        add_from("special=Dentist;3,11,2026", events, today)
        add_from("holiday=Christmas;25,12", events, today)
        result = upcoming(events, today)
        assert [kind for kind, _ in result] == [
            EventKind.BIRTHDAY,
            EventKind.SAINT_DAY,
            EventKind.WEDDING,
            EventKind.HOLIDAY,
            EventKind.SPECIAL,
        ]
        assert [len(found) for _, found in result] == [0, 0, 0, 1, 1]
