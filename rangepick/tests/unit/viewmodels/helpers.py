from __future__ import annotations

from datetime import date
from typing import Any, List

from rangepick.adapters.clock import FixedClock
from rangepick.domain.entities import Period
from rangepick.viewmodels.range_selection_vm import RangeSelectionModel


def make_model_with_recorder(today: date = date(2024, 3, 15), **kwargs: Any):
    """Return a model pinned to ``today`` plus the list its periods land in."""
    periods: List[Period] = []
    model = RangeSelectionModel(
        on_period_changed=periods.append,
        clock=FixedClock(today),
        **kwargs,
    )
    return model, periods


def assert_selection_invariant(model: RangeSelectionModel) -> None:
    if model.end_date is not None:
        assert model.start_date is not None
        assert model.start_date <= model.end_date


__all__ = ["assert_selection_invariant", "make_model_with_recorder"]
