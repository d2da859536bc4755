from enum import Enum
from pathlib import Path
from typing import Dict

from pydantic import BaseModel, ConfigDict, Field

from .dates import Fixed


class EventKind(str, Enum):
    # declaration order is the display order of the report
    BIRTHDAY = "birthday"
    SAINT_DAY = "saint day"
    WEDDING = "wedding anniversary"
    HOLIDAY = "holiday"
    SPECIAL = "special"

    @property
    def label(self) -> str:
        return self.value


class Event(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: EventKind
    date: Fixed
    description: str


DEFAULT_COLORS = {
    EventKind.BIRTHDAY: "red",
    EventKind.SAINT_DAY: "blue",
    EventKind.WEDDING: "green",
    EventKind.HOLIDAY: "yellow",
    EventKind.SPECIAL: "cyan",
}


class Settings(BaseModel):
    data_dir: Path = Path("data")
    extension: str = ".rce"
    colors: Dict[EventKind, str] = Field(default_factory=lambda: dict(DEFAULT_COLORS))

    def color_for(self, kind: EventKind) -> str:
        return self.colors.get(kind, DEFAULT_COLORS[kind])
