"""Default locations for the activity log and bundled assets."""

from __future__ import annotations

from pathlib import Path

from platformdirs import user_data_path

APP_NAME = "DayTimeline"
LOG_FILENAME = "activity.log"


def get_log_path() -> Path:
    """Per-user log location; the directory is created on first append, not here."""
    return user_data_path(appname=APP_NAME, appauthor=False, roaming=True) / LOG_FILENAME


def get_static_dir() -> Path:
    return Path(__file__).parent / "static"
