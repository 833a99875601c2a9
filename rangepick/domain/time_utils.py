from __future__ import annotations

"""Calendar-day helpers shared by the selection model and the calendar view-model.

Everything here works at day granularity: ``datetime`` inputs are truncated to
their ``date`` so that a tap carrying a time component still compares equal to
the plain day rendered in the grid.
"""

import calendar
import re
from datetime import date, datetime
from typing import Any, Optional

_ISO_DAY_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}(?:$|[T ])")


def to_day(value: Any) -> date:
    """Normalize a ``date`` or ``datetime`` to a plain ``date``."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raise TypeError(f"Expected a date or datetime, got {type(value).__name__}.")


def to_optional_day(value: Any) -> Optional[date]:
    if value is None:
        return None
    return to_day(value)


def parse_day(value: Any) -> date:
    """Parse ``YYYY-MM-DD`` text (or a date-like object) into a ``date``.

    Text carrying a time part (``2024-01-10T08:30``) is accepted and truncated.
    Only the extended ``YYYY-MM-DD`` form is accepted; basic ``YYYYMMDD`` text
    is rejected regardless of what the running ``fromisoformat`` tolerates.
    """
    if isinstance(value, (date, datetime)):
        return to_day(value)
    if not isinstance(value, str):
        raise ValueError(f"Expected date text, got {type(value).__name__}.")
    text = value.strip()
    if not text:
        raise ValueError("Empty date text.")
    if not _ISO_DAY_PATTERN.match(text):
        raise ValueError(f"Expected YYYY-MM-DD date text, got {text!r}.")
    if len(text) == 10:
        return date.fromisoformat(text)
    normalized = text.replace(" ", "T")
    if normalized.endswith("Z"):
        normalized = normalized[:-1] + "+00:00"
    return datetime.fromisoformat(normalized).date()


def parse_month(value: Any) -> date:
    """Parse ``YYYY-MM`` or any day text into the first day of that month."""
    if isinstance(value, str):
        text = value.strip()
        parts = text.split("-")
        if len(parts) == 2 and all(part.isdigit() for part in parts):
            return date(int(parts[0]), int(parts[1]), 1)
    return month_start(parse_day(value))


def month_start(value: Any) -> date:
    """Return the first day of the month containing ``value``."""
    day = to_day(value)
    return day.replace(day=1)


def add_months(value: Any, months: int) -> date:
    """Shift the month of ``value`` by ``months``, returning the 1st of the result.

    Year boundaries roll over in both directions (12 -> 1 and 1 -> 12).
    """
    day = to_day(value)
    index = day.year * 12 + (day.month - 1) + int(months)
    year, month_zero = divmod(index, 12)
    return date(year, month_zero + 1, 1)


def days_in_month(value: Any) -> int:
    day = to_day(value)
    return calendar.monthrange(day.year, day.month)[1]


def iter_month_days(value: Any):
    """Yield every day of the month containing ``value``, day 1 first."""
    first = month_start(value)
    for number in range(1, days_in_month(first) + 1):
        yield first.replace(day=number)


def monday_offset(value: Any) -> int:
    """Zero-based weekday of the 1st of the month, Monday=0 .. Sunday=6."""
    return month_start(value).weekday()


__all__ = [
    "add_months",
    "days_in_month",
    "iter_month_days",
    "monday_offset",
    "month_start",
    "parse_day",
    "parse_month",
    "to_day",
    "to_optional_day",
]
