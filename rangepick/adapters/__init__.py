"""Adapter package for concrete port implementations.

Purpose:
    Provide the clock implementations behind ``ClockPort``: the wall clock used
    at runtime and a pinned clock for tests and previews.

Call context:
    Imported by ``rangepick.viewmodels`` (default wiring) and by tests.
"""
from .clock import FixedClock, SystemClock

__all__ = ["FixedClock", "SystemClock"]
