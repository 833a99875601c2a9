"""Selection-state engine for a two-month calendar date-range picker."""

from rangepick.domain.entities import DayModel, Period
from rangepick.domain.ports import ClockPort, SelectionError
from rangepick.viewmodels.calendar_vm import CalendarViewModel
from rangepick.viewmodels.range_selection_vm import RangeSelectionModel
from rangepick.viewmodels.settings_vm import PickerConfig, build_calendar_vm

__all__ = [
    "CalendarViewModel",
    "ClockPort",
    "DayModel",
    "PickerConfig",
    "Period",
    "RangeSelectionModel",
    "SelectionError",
    "build_calendar_vm",
]
