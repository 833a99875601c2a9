from __future__ import annotations

from datetime import date, datetime

import pytest

from rangepick.adapters.clock import FixedClock
from rangepick.domain.entities import Period
from rangepick.viewmodels.calendar_vm import CalendarViewModel
from rangepick.viewmodels.range_selection_vm import RangeSelectionModel


def _make_vm(current_month: date = date(2024, 3, 15)):
    periods = []
    model = RangeSelectionModel(on_period_changed=periods.append, clock=FixedClock(date(2024, 3, 15)))
    vm = CalendarViewModel(model, current_month)
    notifications = []
    vm.changed.subscribe(lambda: notifications.append(vm.current_month))
    return vm, periods, notifications


def test_current_month_is_normalized_to_first_day() -> None:
    vm, _, _ = _make_vm(datetime(2024, 3, 15, 10, 30))
    assert vm.current_month == date(2024, 3, 1)
    assert vm.next_month == date(2024, 4, 1)
    assert vm.visible_months() == (date(2024, 3, 1), date(2024, 4, 1))


def test_next_month_rolls_year_over() -> None:
    vm, _, _ = _make_vm(date(2024, 12, 31))
    assert vm.next_month == date(2025, 1, 1)


def test_setting_current_month_notifies_once() -> None:
    vm, _, notifications = _make_vm()
    vm.current_month = date(2024, 7, 20)

    assert vm.current_month == date(2024, 7, 1)
    assert notifications == [date(2024, 7, 1)]


@pytest.mark.parametrize(
    "start",
    [date(2024, 1, 1), date(2024, 6, 15), date(2024, 11, 30), date(2024, 12, 1), date(2025, 1, 31)],
)
def test_next_then_previous_restores_month(start: date) -> None:
    vm, _, notifications = _make_vm(start)
    vm.next()
    vm.previous()

    assert (vm.current_month.year, vm.current_month.month) == (start.year, start.month)
    assert len(notifications) == 2


def test_previous_rolls_year_back() -> None:
    vm, _, notifications = _make_vm(date(2024, 1, 10))
    vm.previous()

    assert vm.current_month == date(2023, 12, 1)
    assert vm.next_month == date(2024, 1, 1)
    assert notifications == [date(2023, 12, 1)]


def test_next_advances_both_visible_months() -> None:
    vm, _, _ = _make_vm(date(2024, 12, 5))
    vm.next()
    assert vm.visible_months() == (date(2025, 1, 1), date(2025, 2, 1))


def test_each_tap_notifies_exactly_once() -> None:
    vm, periods, notifications = _make_vm()
    vm.on_date_changed(date(2024, 3, 5))
    assert len(notifications) == 1
    vm.on_date_changed(date(2024, 3, 10))
    assert len(notifications) == 2
    vm.on_date_changed(date(2024, 3, 12))
    assert len(notifications) == 3

    assert periods == [Period(date(2024, 3, 5), date(2024, 3, 10))]
    assert vm.model.start_date == date(2024, 3, 12)


def test_listener_sees_post_mutation_state() -> None:
    vm, _, _ = _make_vm()
    seen = []
    vm.changed.subscribe(lambda: seen.append(vm.model.start_date))

    vm.on_date_changed(date(2024, 3, 5))

    assert seen == [date(2024, 3, 5)]


def test_day_lists_cover_both_visible_months() -> None:
    vm, _, _ = _make_vm(date(2024, 1, 20))

    current = vm.retrieve_dates_for_month()
    following = vm.retrieve_dates_for_next_month()

    assert len(current) == 31
    assert current[0].date == date(2024, 1, 1)
    assert len(following) == 29
    assert following[-1].date == date(2024, 2, 29)
    assert vm.retrieve_delta_for_month() == 0  # 2024-01-01 is a Monday
    assert vm.retrieve_delta_for_next_month() == 3  # 2024-02-01 is a Thursday


def test_range_spanning_both_months_is_flagged_in_each() -> None:
    vm, periods, _ = _make_vm(date(2024, 3, 1))
    vm.on_date_changed(date(2024, 3, 30))
    vm.on_date_changed(date(2024, 4, 2))

    march = vm.retrieve_dates_for_month()
    april = vm.retrieve_dates_for_next_month()

    assert [d.date.day for d in march if d.is_in_range] == [30, 31]
    assert [d.date.day for d in april if d.is_in_range] == [1, 2]
    assert march[29].is_start and april[1].is_end
    assert periods == [Period(date(2024, 3, 30), date(2024, 4, 2))]


def test_month_grid_prepends_blank_cells() -> None:
    vm, _, _ = _make_vm(date(2024, 9, 1))
    grid = vm.month_grid(vm.current_month)

    assert grid[:6] == [None] * 6  # 2024-09-01 is a Sunday
    assert grid[6] is not None and grid[6].date == date(2024, 9, 1)
    assert len(grid) == 6 + 30


def test_dispose_stops_notifications() -> None:
    vm, _, notifications = _make_vm()
    vm.dispose()
    vm.dispose()

    vm.next()
    vm.on_date_changed(date(2024, 3, 5))
    late = vm.changed.subscribe(lambda: notifications.append("late"))

    assert vm.disposed is True
    assert notifications == []
    assert late.active is False
    assert vm.model.start_date == date(2024, 3, 5)


def test_cancelled_subscription_receives_nothing() -> None:
    vm, _, _ = _make_vm()
    seen = []
    subscription = vm.changed.subscribe(lambda: seen.append(1))

    vm.next()
    subscription.cancel()
    vm.next()

    assert seen == [1]
    assert subscription.active is False
