from typing import List, Sequence, Tuple

from .dates import Fixed
from .models import Event, EventKind
from .records import parse_line


def add_from(line: str, events: List[Event], today: Fixed) -> None:
    """Parses `line` and appends its events to `events`."""
    events.extend(parse_line(line).into_events(today))


def get_next(events: Sequence[Event], kind: EventKind, today: Fixed) -> List[Event]:
    """
    Returns the events of `kind` on the nearest date not before `today`.

    Events tied on that date keep their original order. The list is scanned
    once and left untouched.
    """
    nearest: List[Event] = []
    for event in events:
        if event.kind != kind or event.date < today:
            continue
        if not nearest or event.date < nearest[0].date:
            nearest = [event]
        elif event.date == nearest[0].date:
            nearest.append(event)
    return nearest


def upcoming(events: Sequence[Event], today: Fixed) -> List[Tuple[EventKind, List[Event]]]:
    return [(kind, get_next(events, kind, today)) for kind in EventKind]
