from __future__ import annotations
from datetime import date
from typing import Any

from rangepick.domain.ports import ClockPort
from rangepick.domain.time_utils import to_day


class SystemClock(ClockPort):
    """Wall-clock "today" in the local timezone."""

    def today(self) -> date:
        return date.today()


class FixedClock(ClockPort):
    """Pinned "today" used by tests and previews."""

    def __init__(self, day: Any) -> None:
        self._day = to_day(day)

    def today(self) -> date:
        return self._day

    def set(self, day: Any) -> None:
        self._day = to_day(day)
