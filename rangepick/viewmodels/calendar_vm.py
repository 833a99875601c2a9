from __future__ import annotations

import logging
from datetime import date
from typing import Any, List, Optional, Tuple

from rangepick.domain.entities import DayModel
from rangepick.domain.time_utils import add_months, month_start
from rangepick.utils.signals import Signal

from .range_selection_vm import RangeSelectionModel

GridCell = Optional[DayModel]

_log = logging.getLogger(__name__)


class CalendarViewModel:
    """
    Two-month calendar state for the range picker view.

    Keeps the anchor month, forwards taps to the owned ``RangeSelectionModel``
    and emits ``changed`` (no payload) after every mutation so the view can
    re-pull both month grids. The second visible month is always derived from
    the anchor, so the two are adjacent by construction.
    """

    def __init__(self, model: RangeSelectionModel, current_month: Any) -> None:
        """Bind the selection model and the initial anchor month.

        Args:
            model: Selection state owned by this view-model.
            current_month: Any day inside the month to display first.
        """
        self.model = model
        self.changed: Signal[None] = Signal("calendar_changed")
        self._current_month: date = month_start(current_month)

    # ------------------------------------------------------------------
    # Displayed months
    # ------------------------------------------------------------------
    @property
    def current_month(self) -> date:
        """First day of the anchor month."""
        return self._current_month

    @current_month.setter
    def current_month(self, value: Any) -> None:
        self._current_month = month_start(value)
        _log.debug("Displayed month -> %s", self._current_month.strftime("%Y-%m"))
        self._notify()

    @property
    def next_month(self) -> date:
        """First day of the month after ``current_month``."""
        return add_months(self._current_month, 1)

    def visible_months(self) -> Tuple[date, date]:
        return self._current_month, self.next_month

    def next(self) -> None:
        self.current_month = self.next_month

    def previous(self) -> None:
        self.current_month = add_months(self._current_month, -1)

    # ------------------------------------------------------------------
    # Commands surfaced to View
    # ------------------------------------------------------------------
    def on_date_changed(self, value: Any) -> None:
        """Forward a day tap to the selection model, then notify once."""
        self.model.on_date_changed(value)
        self._notify()

    # ------------------------------------------------------------------
    # Day lists for the two visible months
    # ------------------------------------------------------------------
    def retrieve_dates_for_month(self) -> List[DayModel]:
        return self.model.retrieve_dates_for_month(self._current_month)

    def retrieve_dates_for_next_month(self) -> List[DayModel]:
        return self.model.retrieve_dates_for_month(self.next_month)

    def retrieve_delta_for_month(self) -> int:
        return self.model.retrieve_delta_for_month(self._current_month)

    def retrieve_delta_for_next_month(self) -> int:
        return self.model.retrieve_delta_for_month(self.next_month)

    def month_grid(self, month: Any) -> List[GridCell]:
        """Return ``month`` as grid cells: ``None`` blanks, then one ``DayModel`` per day."""
        blanks: List[GridCell] = [None] * self.model.retrieve_delta_for_month(month)
        return blanks + list(self.model.retrieve_dates_for_month(month))

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    @property
    def disposed(self) -> bool:
        return self.changed.closed

    def dispose(self) -> None:
        """Stop notifications and release every subscriber."""
        self.changed.close()

    def _notify(self) -> None:
        self.changed.emit()


__all__ = ["CalendarViewModel", "GridCell"]
