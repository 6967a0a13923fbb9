from datetime import date

import pytest

from geo_attendance.core.enums import ErrorCode
from geo_attendance.core.exceptions import NotFoundError
from geo_attendance.schedules.model import Holiday
from geo_attendance.schedules.resolver import (
    HolidayOutcome,
    NonWorkdayOutcome,
    ScheduleWindowResolver,
    WorkWindow,
    derive_window,
)

from conftest import InMemoryHolidays, InMemorySchedules, weekday_schedule

MONDAY = date(2026, 2, 2)
SUNDAY = date(2026, 2, 1)


def _resolver(schedules=None, holidays=()):
    if schedules is None:
        schedules = {d: weekday_schedule(d) for d in range(7)}
    return ScheduleWindowResolver(InMemorySchedules(schedules), InMemoryHolidays(list(holidays)))


def test_bands_are_derived_from_tolerance():
    window = derive_window(weekday_schedule(1))

    assert window.band_start == "09:00"
    assert window.on_time_end == "09:15"
    assert window.tolerance_start == "09:15"
    assert window.tolerance_end == "09:30"
    assert window.label() == "09:00 - 17:00"


def test_explicit_boundaries_win_over_derivation():
    schedule = weekday_schedule(1, on_time_end_time="09:05", tolerance_end_time="10:00")

    window = derive_window(schedule)

    assert window.on_time_end == "09:05"
    assert window.tolerance_start == "09:05"
    assert window.tolerance_end == "10:00"


def test_negative_tolerance_is_treated_as_zero():
    window = derive_window(weekday_schedule(1, late_tolerance_minutes=-5))

    assert window.on_time_end == "09:00"
    assert window.tolerance_end == "09:00"


def test_derived_boundary_wraps_past_midnight():
    window = derive_window(weekday_schedule(1, start_time="23:50", end_time="07:00", late_tolerance_minutes=15))

    assert window.on_time_end == "00:05"


def test_active_weekday_resolves_to_window():
    outcome = _resolver().resolve(MONDAY)

    assert isinstance(outcome, WorkWindow)
    assert outcome.schedule.day_of_week == 1


def test_holiday_takes_precedence_over_schedule():
    holiday = Holiday(holiday_id="h1", holiday_date=MONDAY, name="Cuti Bersama")

    outcome = _resolver(holidays=[holiday]).resolve(MONDAY)

    assert isinstance(outcome, HolidayOutcome)
    assert outcome.holiday_name == "Cuti Bersama"


def test_inactive_holiday_is_ignored():
    holiday = Holiday(holiday_id="h1", holiday_date=MONDAY, name="Dibatalkan", is_active=False)

    assert isinstance(_resolver(holidays=[holiday]).resolve(MONDAY), WorkWindow)


def test_inactive_day_is_not_a_workday():
    outcome = _resolver().resolve(SUNDAY)

    assert isinstance(outcome, NonWorkdayOutcome)
    assert outcome.day_name == "Minggu"


def test_missing_schedule_is_not_configured():
    with pytest.raises(NotFoundError) as exc:
        _resolver(schedules={}).resolve(MONDAY)

    assert exc.value.code == ErrorCode.SCHEDULE_NOT_CONFIGURED
    assert exc.value.details["dayOfWeek"] == 1


@pytest.mark.parametrize(
    "check_in, too_early",
    [("07:55", True), ("07:59", True), ("08:00", False), ("08:05", False), ("09:00", False)],
)
def test_too_early_allows_one_hour_before_start(check_in, too_early):
    hours, minutes = map(int, check_in.split(":"))
    window = derive_window(weekday_schedule(1))

    assert window.is_too_early(hours * 60 + minutes) is too_early
