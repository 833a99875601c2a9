"""ViewModel package for the range picker's UI state and commands.

Call context:
    Host UI code (Tk, NiceGUI, Qt, ...) builds a ``CalendarViewModel`` through
    ``build_calendar_vm`` or directly, subscribes to ``changed`` and re-pulls
    the two month grids on every emission.

Dependencies:
    Modules in this package depend on domain types, the clock adapters and the
    signal helper only. Rendering stays outside.

Responsibilities:
    - Own the range selection state machine and the displayed months.
    - Derive per-day render flags on demand.
    - Publish synchronous change notifications.
"""
