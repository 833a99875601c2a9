"""Typed picker configuration and view-model wiring.

``PickerConfig`` accepts the mapping a host application keeps in its own
settings (ISO strings or date objects) and ``build_calendar_vm`` turns it into
a ready ``CalendarViewModel``. No I/O happens here.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Callable, Dict, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from rangepick.adapters.clock import SystemClock
from rangepick.domain.entities import Period
from rangepick.domain.ports import ClockPort
from rangepick.domain.time_utils import parse_day, parse_month

from .calendar_vm import CalendarViewModel
from .range_selection_vm import RangeSelectionModel

_log = logging.getLogger(__name__)


class PickerConfig(BaseModel):
    """Bounds, initial selection and anchor month for one picker instance."""

    min_date: Optional[date] = Field(None, description="Inclusive lower selectable bound")
    max_date: Optional[date] = Field(None, description="Inclusive upper selectable bound")
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    current_month: Optional[date] = Field(
        None, description="Anchor month, e.g. '2024-01'; defaults to today's month"
    )

    @field_validator("min_date", "max_date", "start_date", "end_date", mode="before")
    @classmethod
    def _parse_day(cls, value: Any) -> Any:
        if value is None or value == "":
            return None
        return parse_day(value)

    @field_validator("current_month", mode="before")
    @classmethod
    def _parse_month(cls, value: Any) -> Any:
        if value is None or value == "":
            return None
        return parse_month(value)

    @model_validator(mode="after")
    def _check_selection(self) -> "PickerConfig":
        if self.end_date is not None and self.start_date is None:
            raise ValueError("end_date requires a start_date")
        if (
            self.start_date is not None
            and self.end_date is not None
            and self.end_date < self.start_date
        ):
            raise ValueError("end_date must not be before start_date")
        return self

    @property
    def period(self) -> Optional[Period]:
        if self.start_date is None or self.end_date is None:
            return None
        return Period(self.start_date, self.end_date)

    def to_payload(self) -> Dict[str, Optional[str]]:
        """Serialize as ISO strings; ``current_month`` as ``YYYY-MM``."""
        def _iso(value: Optional[date]) -> Optional[str]:
            return value.isoformat() if value is not None else None

        return {
            "min_date": _iso(self.min_date),
            "max_date": _iso(self.max_date),
            "start_date": _iso(self.start_date),
            "end_date": _iso(self.end_date),
            "current_month": (
                self.current_month.strftime("%Y-%m") if self.current_month is not None else None
            ),
        }


def build_calendar_vm(
    config: PickerConfig,
    *,
    on_period_changed: Optional[Callable[[Period], None]] = None,
    clock: Optional[ClockPort] = None,
) -> CalendarViewModel:
    """Compose a ``RangeSelectionModel`` and its ``CalendarViewModel`` from ``config``."""
    clock = clock or SystemClock()
    model = RangeSelectionModel(
        on_period_changed=on_period_changed,
        min_date=config.min_date,
        max_date=config.max_date,
        start_date=config.start_date,
        end_date=config.end_date,
        clock=clock,
    )
    current_month = config.current_month or config.start_date or clock.today()
    _log.debug("Calendar view-model anchored at %s", current_month.strftime("%Y-%m"))
    return CalendarViewModel(model, current_month)


__all__ = ["PickerConfig", "build_calendar_vm"]
