"""Simple reporting utilities for CLI output."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from .models import Report
from .presentation import describe_duration, duration_description, height
from .timeline import Clock, activity_totals


class TimelinePrinter:
    """Render human-readable timelines in the console."""

    def __init__(self, report: Report, clock: Clock = datetime.now) -> None:
        self.report = report
        self.clock = clock

    def print_days(self) -> None:
        if not self.report.days:
            print("No activity recorded.")
            return

        today = self.clock().date()
        for index, day in enumerate(self.report.days):
            if index:
                print()
            label = day.date.strftime("%Y-%m-%d")
            if day.date == today:
                label += " (today)"
            print(label)
            print("-" * 40)
            for event in day.events:
                name = event.name or "(nothing)"
                print(
                    f"  {event.start.strftime('%H:%M:%S')}  {name[:30]:<30} "
                    f"{duration_description(event):<22} {height(event.duration):5.1f}%"
                )

    def print_totals(self, limit: Optional[int] = None) -> None:
        totals = activity_totals(self.report.events)
        if not totals:
            print("No activity recorded.")
            return
        print("Time per activity:")
        for name, total in totals[:limit]:
            print(f"  {name[:30]:<30} {describe_duration(total)}")
