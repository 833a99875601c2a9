from __future__ import annotations
from datetime import date
from typing import Protocol


# ---- Error model ----
class SelectionError(ValueError):
    """Raised when an initial selection would break the start/end invariant."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


# ---- Ports ----
class ClockPort(Protocol):
    """Source of "today" for the ``is_today`` render flag."""

    def today(self) -> date: ...
