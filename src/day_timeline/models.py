"""Domain models for the activity timeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta


@dataclass(slots=True)
class RawEvent:
    """A single parsed log line: an activity name and when it started."""

    name: str
    start: datetime


@dataclass(slots=True, frozen=True)
class Event:
    """Represents a block of time spent in a single activity.

    ``original_duration`` is the full gap to the next logged event. ``duration``
    is the part of it that falls on the event's day, which only differs from
    ``original_duration`` once the event has been split at midnight.
    ``total_duration`` sums ``duration`` over every event sharing the name.
    Events are frozen; each pipeline stage hands out new instances.
    """

    name: str
    start: datetime
    original_duration: timedelta = field(default_factory=timedelta)
    duration: timedelta = field(default_factory=timedelta)
    total_duration: timedelta = field(default_factory=timedelta)

    @classmethod
    def from_raw(cls, raw: RawEvent) -> "Event":
        return cls(name=raw.name, start=raw.start)

    @property
    def end(self) -> datetime:
        return self.start + self.duration


@dataclass(slots=True, frozen=True)
class Day:
    """Events falling within one local calendar date."""

    date: date
    events: tuple[Event, ...] = ()

    @property
    def duration(self) -> timedelta:
        return sum((event.duration for event in self.events), timedelta())


@dataclass(slots=True, frozen=True)
class Report:
    days: tuple[Day, ...] = ()

    @property
    def events(self) -> list[Event]:
        return [event for day in self.days for event in day.events]
