"""Parse the plain-text activity log into raw events."""

from __future__ import annotations

import re
from datetime import datetime, timedelta
from pathlib import Path
from typing import Iterable, Optional

from .models import RawEvent

NUMERIC_FIELDS = 6

_INTEGER_PATTERN = re.compile(r"[+-]?\d+")


class ParseError(ValueError):
    """Raised when a numeric field of a log line cannot be read."""

    def __init__(self, field_index: int, line_number: int, value: Optional[str]) -> None:
        self.field_index = field_index
        self.line_number = line_number
        self.value = value
        shown = "missing" if value is None else repr(value)
        super().__init__(
            f"Field {field_index} on line {line_number} is not numeric: {shown}"
        )


def parse_lines(lines: Iterable[str]) -> list[RawEvent]:
    """Turn ``YYYY MM DD hh mm ss name...`` lines into raw events, in file order."""
    events: list[RawEvent] = []
    for line_number, line in enumerate(lines, start=1):
        text = line.rstrip("\r\n")
        if not text.strip():
            continue
        events.append(parse_line(text, line_number))
    return events


def parse_line(text: str, line_number: int) -> RawEvent:
    fields = text.split(None, NUMERIC_FIELDS)
    numbers: list[int] = []
    for index in range(NUMERIC_FIELDS):
        value = fields[index] if index < len(fields) else None
        if value is None or not _INTEGER_PATTERN.fullmatch(value):
            raise ParseError(index, line_number, value)
        numbers.append(int(value))
    name = fields[NUMERIC_FIELDS] if len(fields) > NUMERIC_FIELDS else ""
    try:
        start = normalized_datetime(*numbers)
    except (ValueError, OverflowError) as exc:
        raise ParseError(0, line_number, fields[0]) from exc
    return RawEvent(name=name, start=start)


def normalized_datetime(
    year: int, month: int, day: int, hour: int, minute: int, second: int
) -> datetime:
    """Build a local timestamp, carrying out-of-range fields into larger units."""
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    return datetime(year, month, 1) + timedelta(
        days=day - 1, hours=hour, minutes=minute, seconds=second
    )


def read_log(path: Path) -> list[RawEvent]:
    """Parse a log file; a file that does not exist yet holds no events.

    Bytes that are not valid UTF-8 are read as U+FFFD rather than failing.
    """
    path = Path(path)
    if not path.exists():
        return []
    with path.open("r", encoding="utf-8", errors="replace") as handle:
        return parse_lines(handle)
