"""Tests for appending entries to the activity log."""

from datetime import datetime

from day_timeline.logfile import append_entry, format_entry
from day_timeline.normalization import normalize_activity_name
from day_timeline.parser import read_log

from conftest import fixed_clock


def test_format_entry():
    assert format_entry(datetime(2024, 1, 2, 3, 4, 5), "tea") == "2024 01 02 03 04 05 tea\n"


def test_append_entry_round_trips(tmp_path):
    path = tmp_path / "nested" / "activity.log"
    append_entry(path, "deep  work\n", fixed_clock(datetime(2024, 5, 6, 7, 8, 9, 500)))
    append_entry(path, "", fixed_clock(datetime(2024, 5, 6, 8, 0, 0)))

    assert path.read_text(encoding="utf-8") == (
        "2024 05 06 07 08 09 deep work\n2024 05 06 08 00 00 \n"
    )
    events = read_log(path)
    assert [(e.name, e.start) for e in events] == [
        ("deep work", datetime(2024, 5, 6, 7, 8, 9)),
        ("", datetime(2024, 5, 6, 8)),
    ]


def test_normalize_activity_name():
    assert normalize_activity_name("  a\tb\r\nc  ") == "a b c"
    assert normalize_activity_name(None) == ""
    assert normalize_activity_name("   ") == ""
