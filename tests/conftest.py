"""Shared fixtures: a fixed clock and a scratch data directory."""

from pathlib import Path

import pytest

from remindcal.dates import Fixed

TODAY = Fixed.from_parts(19, 10, 2026)

SAMPLE_RECORDS = """\
# family
person=Ada, Lovelace, ; 10,12,1815 ; ;
person=, , Grandma ; 19,10 ; ;       # birthday today
person=John, Smith, ; ; ; 20,9,2010

holiday=Christmas ; 25,12
holiday=Halloween ; 31,10
special=Dentist ; 3,11,2026
"""


@pytest.fixture
def today() -> Fixed:
    return TODAY


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """A data directory holding one sample record file."""
    directory = tmp_path / "data"
    directory.mkdir()
    (directory / "family.rce").write_text(SAMPLE_RECORDS, encoding="utf-8")
    return directory
