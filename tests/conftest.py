from __future__ import annotations

from datetime import datetime
from typing import Callable

import pytest


def fixed_clock(value: datetime) -> Callable[[], datetime]:
    return lambda: value


@pytest.fixture
def write_log(tmp_path):
    def _write(*lines: str):
        path = tmp_path / "activity.log"
        path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
        return path

    return _write
