"""Tests for display values handed to the renderers."""

from datetime import datetime, timedelta

import pytest

from day_timeline.models import Day, Event, Report
from day_timeline.parser import parse_lines
from day_timeline.presentation import (
    color_of,
    day_width,
    describe_duration,
    duration_description,
    height,
    report_payload,
    time_of_day,
)
from day_timeline.timeline import build_report

from conftest import fixed_clock


class TestColorOf:
    def test_empty_name_is_neutral(self):
        assert color_of("") == "white"

    def test_hue_from_first_sha1_byte(self):
        # sha1("abc") starts with 0xa9, sha1("hello") with 0xaa.
        assert color_of("abc") == "hsl(237,90%,45%)"
        assert color_of("hello") == "hsl(239,90%,45%)"

    def test_stable(self):
        assert color_of("coding") == color_of("coding")

    def test_same_color_for_split_fragments(self):
        report = build_report(
            parse_lines(["2024 01 01 23 00 00 sleep\n", "2024 01 02 07 00 00 wake\n"]),
            fixed_clock(datetime(2024, 1, 2, 8)),
        )
        colors = {color_of(e.name) for e in report.events if e.name == "sleep"}
        assert len(colors) == 1


@pytest.mark.parametrize(
    "duration, expected",
    [
        (timedelta(0), "0 sec"),
        (timedelta(seconds=59), "59 sec"),
        (timedelta(seconds=60), "1.0 min"),
        (timedelta(seconds=90), "1.5 min"),
        (timedelta(hours=1), "1.0 hours"),
        (timedelta(hours=23, minutes=30), "23.5 hours"),
        (timedelta(days=1), "1.0 days"),
        (timedelta(hours=36), "1.5 days"),
        (timedelta(hours=-1), "-3600 sec"),
    ],
)
def test_describe_duration(duration, expected):
    assert describe_duration(duration) == expected


class TestDurationDescription:
    def test_single_occurrence(self):
        event = Event(
            name="a",
            start=datetime(2024, 1, 1),
            original_duration=timedelta(minutes=30),
            duration=timedelta(minutes=30),
            total_duration=timedelta(minutes=30),
        )
        assert duration_description(event) == "30.0 min"

    def test_recurring(self):
        event = Event(
            name="code",
            start=datetime(2024, 1, 1),
            original_duration=timedelta(hours=1),
            duration=timedelta(hours=1),
            total_duration=timedelta(hours=2),
        )
        assert duration_description(event) == "1.0 hours of 2.0 hours"


def test_height():
    assert height(timedelta(hours=12)) == 50
    assert height(timedelta(0)) == 0


def test_day_width():
    days = tuple(Day(date=datetime(2024, 1, d).date()) for d in (1, 2, 3, 4))
    assert day_width(Report(days=days)) == 25
    assert day_width(Report()) == 0.0


def test_time_of_day():
    event = Event(name="a", start=datetime(2024, 1, 1, 1, 2, 3))
    assert time_of_day(event) == 3723


class TestReportPayload:
    def test_payload(self):
        report = build_report(
            parse_lines(["2024 01 01 23 30 00 sleep\n", "2024 01 02 00 30 00 wake\n"]),
            fixed_clock(datetime(2024, 1, 2, 1)),
        )
        payload = report_payload(report, fixed_clock(datetime(2024, 1, 2, 1)))

        assert payload["day_width"] == 50
        assert [day["date"] for day in payload["days"]] == ["2024-01-01", "2024-01-02"]
        assert [day["is_today"] for day in payload["days"]] == [False, True]

        filler, sleep = payload["days"][0]["events"]
        assert filler["color"] == "white"
        assert filler["description"] == "23.5 hours"
        assert sleep["description"] == "1.0 hours"
        assert sleep["height"] == pytest.approx(100 * 1800 / 86400)
        assert sleep["time_of_day"] == 23 * 3600 + 30 * 60

        assert payload["totals"] == [
            {
                "name": "sleep",
                "seconds": 3600.0,
                "description": "1.0 hours",
                "color": color_of("sleep"),
            },
            {
                "name": "wake",
                "seconds": 1800.0,
                "description": "30.0 min",
                "color": color_of("wake"),
            },
        ]

    def test_empty(self):
        payload = report_payload(Report(), fixed_clock(datetime(2024, 1, 1)))
        assert payload == {"day_width": 0.0, "days": [], "totals": []}


def test_report_payload_reads_the_clock_once():
    calls = []

    def clock():
        calls.append(1)
        return datetime(2024, 1, 1, 12)

    report = build_report(
        parse_lines(["2024 01 01 09 00 00 a\n"]), fixed_clock(datetime(2024, 1, 1, 12))
    )
    payload = report_payload(report, clock)
    assert payload["days"][0]["is_today"] is True
    assert calls == [1]
