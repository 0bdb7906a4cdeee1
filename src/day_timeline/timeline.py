"""Duration, day-splitting and aggregation stages of the timeline pipeline."""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import replace
from datetime import date, datetime, timedelta
from pathlib import Path
from typing import Callable, Iterable, Iterator, Sequence

from .models import Day, Event, RawEvent, Report
from .parser import read_log

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

FILLER_NAME = ""


def start_of_day(value: datetime) -> datetime:
    return value.replace(hour=0, minute=0, second=0, microsecond=0)


def start_of_next_day(value: datetime) -> datetime:
    return start_of_day(value) + timedelta(days=1)


def calculate_durations(events: Sequence[Event], now: datetime) -> list[Event]:
    """Give every event the gap to the next one; the last event runs until ``now``.

    Out-of-order input produces negative durations, which are kept as-is.
    """
    if not events:
        return []
    timed: list[Event] = []
    ends = [event.start for event in events[1:]] + [now]
    for event, end in zip(events, ends):
        gap = end - event.start
        if gap < timedelta(0):
            logger.warning(
                "Event %r at %s is followed by an earlier timestamp; duration is %s.",
                event.name,
                event.start,
                gap,
            )
        timed.append(replace(event, original_duration=gap, duration=gap))
    return timed


def split_event(event: Event) -> Iterator[Event]:
    """Yield the per-day fragments of ``event``, in order."""
    start = event.start
    remaining = event.duration
    while True:
        split_at = start_of_next_day(start)
        if start + remaining < split_at:
            yield _fragment(event, start, remaining)
            return
        head = split_at - start
        yield _fragment(event, start, head)
        start = split_at
        remaining -= head


def _fragment(event: Event, start: datetime, duration: timedelta) -> Event:
    return Event(
        name=event.name,
        start=start,
        original_duration=event.original_duration,
        duration=duration,
    )


def split_by_day(events: Iterable[Event]) -> list[Day]:
    """Fragment events at local midnight and group the fragments into days.

    A new day opens whenever a fragment's date differs from the open one, so
    days come out in first-seen order.
    """
    buckets: list[tuple[date, list[Event]]] = []
    for event in events:
        for fragment in split_event(event):
            day = fragment.start.date()
            if not buckets or buckets[-1][0] != day:
                buckets.append((day, []))
            buckets[-1][1].append(fragment)
    return [Day(date=day, events=tuple(fragments)) for day, fragments in buckets]


def backfill_first_day(days: list[Day]) -> list[Day]:
    """Prefix the first day with an unnamed event reaching back to midnight."""
    if not days or not days[0].events:
        return days
    first = days[0]
    midnight = start_of_day(first.events[0].start)
    gap = first.events[0].start - midnight
    filler = Event(
        name=FILLER_NAME,
        start=midnight,
        original_duration=gap,
        duration=gap,
    )
    return [Day(date=first.date, events=(filler, *first.events)), *days[1:]]


def aggregate_durations(events: Iterable[Event]) -> dict[str, timedelta]:
    totals: defaultdict[str, timedelta] = defaultdict(timedelta)
    for event in events:
        if event.name != FILLER_NAME:
            totals[event.name] += event.duration
    return dict(totals)


def calculate_total_durations(events: Sequence[Event]) -> list[Event]:
    """Attach each named activity's summed duration to all of its fragments.

    Unnamed fragments are not aggregated; their total is their own original
    duration so they never read as a recurring activity.
    """
    return _with_totals(events, aggregate_durations(events))


def attach_totals(days: Sequence[Day]) -> list[Day]:
    totals = aggregate_durations(event for day in days for event in day.events)
    return [
        Day(date=day.date, events=tuple(_with_totals(day.events, totals)))
        for day in days
    ]


def _with_totals(events: Iterable[Event], totals: dict[str, timedelta]) -> list[Event]:
    return [
        replace(
            event,
            total_duration=(
                event.original_duration
                if event.name == FILLER_NAME
                else totals[event.name]
            ),
        )
        for event in events
    ]


def activity_totals(events: Iterable[Event]) -> list[tuple[str, timedelta]]:
    totals = aggregate_durations(events)
    return sorted(totals.items(), key=lambda item: item[1], reverse=True)


def build_report(raw_events: Sequence[RawEvent], clock: Clock = datetime.now) -> Report:
    """Run the duration, splitting and aggregation stages over parsed events."""
    if not raw_events:
        return Report()
    now = clock().replace(microsecond=0)
    events = calculate_durations([Event.from_raw(raw) for raw in raw_events], now)
    days = attach_totals(backfill_first_day(split_by_day(events)))
    report = Report(days=tuple(days))
    logger.debug(
        "Built report with %d events across %d days.", len(events), len(report.days)
    )
    return report


def load_report(path: Path, clock: Clock = datetime.now) -> Report:
    return build_report(read_log(path), clock)
