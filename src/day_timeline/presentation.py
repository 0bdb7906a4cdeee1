"""Display values derived from a report, consumed by the HTML and console views."""

from __future__ import annotations

import hashlib
from datetime import datetime, timedelta
from typing import Any, Dict

from .models import Event, Report
from .timeline import FILLER_NAME, Clock, activity_totals

SECONDS_PER_DAY = 86400
NEUTRAL_COLOR = "white"


def color_of(name: str) -> str:
    """Return an HSL color whose hue comes from the first SHA-1 byte of ``name``.

    Only the first digest byte is used so the same name renders with the same
    hue everywhere the log is viewed.
    """
    if name == FILLER_NAME:
        return NEUTRAL_COLOR
    first_byte = hashlib.sha1(name.encode("utf-8")).digest()[0]
    hue = 360 * first_byte // 256
    return f"hsl({hue},90%,45%)"


def describe_duration(duration: timedelta) -> str:
    seconds = duration.total_seconds()
    if seconds >= SECONDS_PER_DAY:
        return f"{seconds / SECONDS_PER_DAY:.1f} days"
    if seconds >= 3600:
        return f"{seconds / 3600:.1f} hours"
    if seconds >= 60:
        return f"{seconds / 60:.1f} min"
    return f"{seconds:.0f} sec"


def duration_description(event: Event) -> str:
    if event.original_duration == event.total_duration:
        return describe_duration(event.original_duration)
    return (
        f"{describe_duration(event.original_duration)} of "
        f"{describe_duration(event.total_duration)}"
    )


def height(duration: timedelta) -> float:
    """Share of a day covered by ``duration``, as a percentage."""
    return 100 * duration.total_seconds() / SECONDS_PER_DAY


def day_width(report: Report) -> float:
    if not report.days:
        return 0.0
    return 100 / len(report.days)


def time_of_day(event: Event) -> int:
    start = event.start
    return start.hour * 3600 + start.minute * 60 + start.second


def event_payload(event: Event) -> Dict[str, Any]:
    return {
        "name": event.name,
        "start": event.start.isoformat(),
        "time_of_day": time_of_day(event),
        "color": color_of(event.name),
        "description": duration_description(event),
        "height": height(event.duration),
        "duration_seconds": event.duration.total_seconds(),
        "original_duration_seconds": event.original_duration.total_seconds(),
        "total_duration_seconds": event.total_duration.total_seconds(),
    }


def report_payload(report: Report, clock: Clock = datetime.now) -> Dict[str, Any]:
    """Flatten a report into JSON-ready values for the renderer."""
    today = clock().date()
    return {
        "day_width": day_width(report),
        "days": [
            {
                "date": day.date.isoformat(),
                "is_today": day.date == today,
                "events": [event_payload(event) for event in day.events],
            }
            for day in report.days
        ],
        "totals": [
            {
                "name": name,
                "seconds": total.total_seconds(),
                "description": describe_duration(total),
                "color": color_of(name),
            }
            for name, total in activity_totals(report.events)
        ],
    }
