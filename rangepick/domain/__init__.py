"""Domain package exports for value objects, ports and day helpers."""

from .entities import DayModel, Period
from .ports import ClockPort, SelectionError
from .time_utils import add_months, month_start, parse_day, parse_month, to_day

__all__ = [
    "ClockPort",
    "DayModel",
    "Period",
    "SelectionError",
    "add_months",
    "month_start",
    "parse_day",
    "parse_month",
    "to_day",
]
