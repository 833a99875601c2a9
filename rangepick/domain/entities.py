from __future__ import annotations

"""Domain value objects shared by the selection model and the calendar view-model."""

from dataclasses import dataclass
from datetime import date
from typing import Any

from .time_utils import to_day


@dataclass(frozen=True)
class Period:
    """Completed selection: an inclusive pair of calendar days with ``start <= end``."""

    start: date
    """First selected day (inclusive)."""

    end: date
    """Last selected day (inclusive); equal to ``start`` for a one-day range."""

    def __post_init__(self) -> None:
        start = to_day(self.start)
        end = to_day(self.end)
        if start > end:
            raise ValueError(f"Period start {start} is after end {end}.")
        object.__setattr__(self, "start", start)
        object.__setattr__(self, "end", end)

    def __contains__(self, value: Any) -> bool:
        day = to_day(value)
        return self.start <= day <= self.end

    @property
    def days(self) -> int:
        """Number of days covered, counting both ends."""
        return (self.end - self.start).days + 1

    def __str__(self) -> str:
        return f"{self.start.isoformat()}..{self.end.isoformat()}"


@dataclass(frozen=True)
class DayModel:
    """Render flags for one calendar day, derived from the current selection state.

    Instances are recomputed every time a month is queried and never cached, so
    they always reflect the state at query time.
    """

    date: date
    is_selected: bool = False
    is_start: bool = False
    is_end: bool = False
    is_selectable: bool = True
    is_today: bool = False
    is_in_range: bool = False

    def __str__(self) -> str:
        return self.date.isoformat()


__all__ = ["DayModel", "Period"]
