"""Range selection state machine for the date-range picker.

Call context:
    ``CalendarViewModel`` owns one instance and forwards day taps to
    ``on_date_changed``. Host code listens on ``period_changed`` to receive
    completed ranges.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Callable, List, Optional

from rangepick.adapters.clock import SystemClock
from rangepick.domain.entities import DayModel, Period
from rangepick.domain.ports import ClockPort, SelectionError
from rangepick.domain.time_utils import (
    iter_month_days,
    monday_offset,
    to_day,
    to_optional_day,
)
from rangepick.utils.signals import Signal

_log = logging.getLogger(__name__)


class RangeSelectionModel:
    """
    Owns the selected range and the selectable bounds.

    The selection cycles through three states driven by ``on_date_changed``:
    empty -> start only -> complete -> (any tap) start only -> ...
    ``start_date`` and ``end_date`` are read-only so that no caller can break
    ``end_date is not None => start_date is not None`` or
    ``start_date <= end_date``.

    ``min_date``/``max_date`` are advisory: ``date_is_selectable`` reports them
    but ``on_date_changed`` does not consult them. When ``min_date > max_date``
    no day is selectable.
    """

    def __init__(
        self,
        period: Optional[Period] = None,
        on_period_changed: Optional[Callable[[Period], None]] = None,
        *,
        min_date: Any = None,
        max_date: Any = None,
        start_date: Any = None,
        end_date: Any = None,
        clock: Optional[ClockPort] = None,
    ) -> None:
        """Seed bounds and the initial selection.

        Args:
            period: Initial completed range; overrides ``start_date``/``end_date``.
            on_period_changed: Convenience listener subscribed to ``period_changed``.
            min_date: Inclusive lower selectable bound.
            max_date: Inclusive upper selectable bound.
            start_date: Initial start when no ``period`` is given.
            end_date: Initial end when no ``period`` is given.
            clock: Source of "today"; defaults to the system clock.

        Raises:
            SelectionError: ``end_date`` without ``start_date`` or before it.
        """
        self.period_changed: Signal[Period] = Signal("period_changed")
        self._clock: ClockPort = clock or SystemClock()
        self._min_date: Optional[date] = to_optional_day(min_date)
        self._max_date: Optional[date] = to_optional_day(max_date)

        if period is not None:
            start, end = period.start, period.end
        else:
            start, end = to_optional_day(start_date), to_optional_day(end_date)
            if end is not None and start is None:
                raise SelectionError("END_WITHOUT_START", "end_date requires a start_date.")
            if start is not None and end is not None and end < start:
                raise SelectionError(
                    "END_BEFORE_START", f"end_date {end} is before start_date {start}."
                )
        self._start_date: Optional[date] = start
        self._end_date: Optional[date] = end

        if (
            self._min_date is not None
            and self._max_date is not None
            and self._min_date > self._max_date
        ):
            _log.warning(
                "min_date %s is after max_date %s; no day will be selectable.",
                self._min_date,
                self._max_date,
            )

        if on_period_changed is not None:
            self.period_changed.subscribe(on_period_changed)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------
    @property
    def start_date(self) -> Optional[date]:
        return self._start_date

    @property
    def end_date(self) -> Optional[date]:
        return self._end_date

    @property
    def min_date(self) -> Optional[date]:
        return self._min_date

    @min_date.setter
    def min_date(self, value: Any) -> None:
        self._min_date = to_optional_day(value)

    @property
    def max_date(self) -> Optional[date]:
        return self._max_date

    @max_date.setter
    def max_date(self, value: Any) -> None:
        self._max_date = to_optional_day(value)

    @property
    def clock(self) -> ClockPort:
        return self._clock

    @property
    def is_complete(self) -> bool:
        return self._start_date is not None and self._end_date is not None

    @property
    def period(self) -> Optional[Period]:
        """The completed range, or ``None`` while the selection is incomplete."""
        if self._start_date is None or self._end_date is None:
            return None
        return Period(self._start_date, self._end_date)

    @property
    def selectable_period(self) -> Optional[Period]:
        """Both bounds as a ``Period`` when set and ordered, else ``None``."""
        if self._min_date is None or self._max_date is None:
            return None
        if self._min_date > self._max_date:
            return None
        return Period(self._min_date, self._max_date)

    # ------------------------------------------------------------------
    # Transition
    # ------------------------------------------------------------------
    def on_date_changed(self, value: Any) -> None:
        """Apply one day tap to the selection.

        - nothing selected: the day becomes the start.
        - start only: a day before the start replaces it (still incomplete);
          any other day, the start itself included, completes the range and
          emits ``period_changed`` once.
        - complete range: the old range is dropped and the day becomes the new
          start.
        """
        day = to_day(value)
        if self._start_date is None:
            self._start_date = day
        elif self._end_date is None:
            if day < self._start_date:
                self._start_date = day
            else:
                self._end_date = day
                period = Period(self._start_date, self._end_date)
                _log.debug("Selection start=%s end=%s", self._start_date, self._end_date)
                _log.debug("Period completed: %s", period)
                self.period_changed.emit(period)
                return
        else:
            self._start_date = day
            self._end_date = None
        _log.debug("Selection start=%s end=%s", self._start_date, self._end_date)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def date_in_selected_range(self, value: Any) -> bool:
        if self._start_date is None or self._end_date is None:
            return False
        day = to_day(value)
        return self._start_date <= day <= self._end_date

    def date_is_selectable(self, value: Any) -> bool:
        day = to_day(value)
        if self._min_date is not None and day < self._min_date:
            return False
        if self._max_date is not None and day > self._max_date:
            return False
        return True

    def date_is_start(self, value: Any) -> bool:
        if self._start_date is None:
            return False
        return to_day(value) == self._start_date

    def date_is_end(self, value: Any) -> bool:
        if self._end_date is None:
            return False
        return to_day(value) == self._end_date

    def date_is_start_or_end(self, value: Any) -> bool:
        """True on either edge of the range; drives the rounded tile corners."""
        return self.date_is_start(value) or self.date_is_end(value)

    def retrieve_dates_for_month(self, month: Any) -> List[DayModel]:
        """Return one ``DayModel`` per day of ``month``, day 1 first."""
        today = self._clock.today()
        return [self._to_day_model(day, today) for day in iter_month_days(month)]

    def retrieve_delta_for_month(self, month: Any) -> int:
        """Leading blank cells before the 1st of ``month`` in a Monday-first grid."""
        return monday_offset(month)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _to_day_model(self, day: date, today: date) -> DayModel:
        is_start = self.date_is_start(day)
        is_end = self.date_is_end(day)
        return DayModel(
            date=day,
            is_selected=is_start or is_end,
            is_start=is_start,
            is_end=is_end,
            is_selectable=self.date_is_selectable(day),
            is_today=day == today,
            is_in_range=self.date_in_selected_range(day),
        )


__all__ = ["RangeSelectionModel"]
