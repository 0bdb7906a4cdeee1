"""Append-only access to the activity log file."""

from __future__ import annotations

import logging
import threading
from datetime import datetime
from pathlib import Path

from .models import RawEvent
from .normalization import normalize_activity_name
from .timeline import Clock

logger = logging.getLogger(__name__)

ENTRY_FMT = "%Y %m %d %H %M %S"

_append_lock = threading.Lock()


def format_entry(when: datetime, name: str) -> str:
    """Render one log line in the layout the parser reads back."""
    return f"{when.strftime(ENTRY_FMT)} {name}\n"


def append_entry(path: Path, name: str, clock: Clock = datetime.now) -> RawEvent:
    """Record that ``name`` starts now; an empty name means nothing is going on."""
    path = Path(path)
    event = RawEvent(
        name=normalize_activity_name(name),
        start=clock().replace(microsecond=0),
    )
    path.parent.mkdir(parents=True, exist_ok=True)
    with _append_lock:
        with path.open("a", encoding="utf-8") as handle:
            handle.write(format_entry(event.start, event.name))
    logger.info("Logged %r at %s to %s", event.name, event.start, path)
    return event
