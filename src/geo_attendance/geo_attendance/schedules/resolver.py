"""Schedule Window Resolver.

For a local calendar date, decides whether work is expected and derives the
punctuality bands. Outcomes are tagged results: ``HolidayOutcome``,
``NonWorkdayOutcome`` or ``WorkWindow``.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Union

from ..common.datetime_utils import day_of_week, minutes_to_time, time_to_minutes
from ..core.constants import EARLY_CHECKIN_BUFFER_MINUTES
from ..core.enums import ErrorCode
from ..core.exceptions import NotFoundError
from .model import Holiday, WorkSchedule
from .repository import HolidayRepository, WorkScheduleRepository


@dataclass(frozen=True)
class HolidayOutcome:
    holiday: Holiday

    @property
    def holiday_name(self) -> str:
        return self.holiday.name


@dataclass(frozen=True)
class NonWorkdayOutcome:
    schedule: WorkSchedule

    @property
    def day_name(self) -> str:
        return self.schedule.day_name


@dataclass(frozen=True)
class WorkWindow:
    schedule: WorkSchedule
    band_start: str
    on_time_end: str
    tolerance_start: str
    tolerance_end: str
    shift_end: str

    @property
    def start_minutes(self) -> int:
        return time_to_minutes(self.band_start)

    @property
    def on_time_end_minutes(self) -> int:
        return time_to_minutes(self.on_time_end)

    @property
    def tolerance_end_minutes(self) -> int:
        return time_to_minutes(self.tolerance_end)

    def is_too_early(self, check_in_minutes: int) -> bool:
        return (check_in_minutes - self.start_minutes) < -EARLY_CHECKIN_BUFFER_MINUTES

    def label(self) -> str:
        return f"{self.band_start} - {self.shift_end}"


WindowOutcome = Union[HolidayOutcome, NonWorkdayOutcome, WorkWindow]


def derive_window(schedule: WorkSchedule) -> WorkWindow:
    """Fill in missing band boundaries additively from ``late_tolerance_minutes``."""

    tolerance = max(0, int(schedule.late_tolerance_minutes or 0))

    on_time_end = schedule.on_time_end_time
    if not on_time_end:
        on_time_end = minutes_to_time(time_to_minutes(schedule.start_time) + tolerance)

    tolerance_start = schedule.tolerance_start_time or on_time_end

    tolerance_end = schedule.tolerance_end_time
    if not tolerance_end:
        tolerance_end = minutes_to_time(time_to_minutes(tolerance_start) + tolerance)

    return WorkWindow(
        schedule=schedule,
        band_start=schedule.start_time,
        on_time_end=on_time_end,
        tolerance_start=tolerance_start,
        tolerance_end=tolerance_end,
        shift_end=schedule.end_time,
    )


class ScheduleWindowResolver:
    def __init__(self, schedules: WorkScheduleRepository, holidays: HolidayRepository):
        self._schedules = schedules
        self._holidays = holidays

    def resolve(self, local_date: date) -> WindowOutcome:
        holiday = self._holidays.get_active_on(local_date)
        if holiday:
            return HolidayOutcome(holiday=holiday)

        schedule = self._schedules.get_by_day_of_week(day_of_week(local_date))
        if not schedule:
            raise NotFoundError(
                "Jadwal kerja untuk hari ini belum dikonfigurasi",
                code=ErrorCode.SCHEDULE_NOT_CONFIGURED,
                details={"dayOfWeek": day_of_week(local_date), "date": local_date.isoformat()},
            )
        if not schedule.is_active:
            return NonWorkdayOutcome(schedule=schedule)

        return derive_window(schedule)
