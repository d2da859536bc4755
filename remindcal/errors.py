from pathlib import Path
from typing import Optional


class ParseError(ValueError):
    """A record or date that does not follow the grammar."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class SpanOrderError(ParseError):
    pass


class RecordError(ParseError):
    """A parse failure tied to its position in a source file."""

    def __init__(self, reason: str, path: Optional[Path] = None, line_no: Optional[int] = None):
        super().__init__(reason)
        self.path = path
        self.line_no = line_no

    def __str__(self) -> str:
        if self.path is None:
            return self.reason
        return f"{self.path}:{self.line_no}: {self.reason}"
