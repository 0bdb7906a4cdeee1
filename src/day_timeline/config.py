"""Configuration models and helpers for the timeline viewer."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .paths import get_log_path, get_static_dir


@dataclass(slots=True)
class TimelineSettings:
    """Runtime configuration for the web viewer and log commands."""

    host: str = "127.0.0.1"
    port: int = 8765
    log_path: Path = field(default_factory=get_log_path)
    static_dir: Path = field(default_factory=get_static_dir)

    @classmethod
    def from_options(
        cls,
        host: Optional[str] = None,
        port: Optional[int] = None,
        log_path: Optional[Path] = None,
        static_dir: Optional[Path] = None,
    ) -> "TimelineSettings":
        return cls(
            host=host or "127.0.0.1",
            port=port if port is not None else 8765,
            log_path=Path(log_path) if log_path else get_log_path(),
            static_dir=Path(static_dir) if static_dir else get_static_dir(),
        )
