"""Utilities to normalize activity names before they are logged."""

from __future__ import annotations

import re
from typing import Optional

_WHITESPACE_PATTERN = re.compile(r"\s+")


def normalize_activity_name(name: Optional[str]) -> str:
    """Collapse whitespace so a name always fits on a single log line."""
    if not name:
        return ""
    return _WHITESPACE_PATTERN.sub(" ", name).strip()
