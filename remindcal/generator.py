import logging
from collections import Counter
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from .dates import Fixed
from .errors import ParseError, RecordError
from .models import Event, EventKind, Settings
from .renderer import ReportRenderer
from .selector import add_from, upcoming
from .utils import find_record_files, load_settings, read_record_lines

logger = logging.getLogger(__name__)


class ReminderGenerator:
    """
    Collects events from record files and reports the next ones per kind.

    `today` is sampled once here and used for every date computation of the run.
    """

    def __init__(self, settings_path: Optional[Path] = None, today: Optional[Fixed] = None, settings: Optional[Settings] = None):
        self.settings = settings if settings is not None else load_settings(settings_path)
        self.today = today if today is not None else Fixed.now()
        self.events: List[Event] = []
        self.files: List[Path] = []
        self.records = 0
        self.skipped = 0

    def load(self, data_dir: Optional[Path] = None, skip_invalid: bool = False) -> int:
        """Reads every record file of the data directory. Returns the number of events."""
        directory = data_dir if data_dir is not None else self.settings.data_dir
        for path in find_record_files(directory, self.settings.extension):
            logger.info('found file "%s"', path)
            self.files.append(path)
            for line_no, text in read_record_lines(path):
                self.add_line(text, path, line_no, skip_invalid=skip_invalid)
        return len(self.events)

    def add_line(self, line: str, path: Optional[Path] = None, line_no: Optional[int] = None, skip_invalid: bool = False):
        try:
            add_from(line, self.events, self.today)
        except ParseError as err:
            error = RecordError(err.reason, path, line_no)
            if not skip_invalid:
                raise error from err
            logger.warning("skipping invalid record: %s", error)
            self.skipped += 1
            return
        self.records += 1

    def counts(self) -> Dict[EventKind, int]:
        counter = Counter(event.kind for event in self.events)
        return {kind: counter[kind] for kind in EventKind}

    def upcoming(self) -> List[Tuple[EventKind, List[Event]]]:
        return upcoming(self.events, self.today)

    def report_context(self) -> dict:
        entries = []
        for kind, events in self.upcoming():
            date = events[0].date if events else None
            entries.append({
                "label": kind.label,
                "color": self.settings.color_for(kind),
                "events": events,
                "date": date,
                "days": self.today.days_to(date) if date is not None else None,
            })
        return {"today": self.today, "entries": entries}

    def render(self, color: bool = True) -> str:
        return ReportRenderer(color=color).render("report.txt.j2", self.report_context())
