from __future__ import annotations

from datetime import date
from typing import Optional, Protocol

from .model import Holiday, WorkSchedule


class WorkScheduleRepository(Protocol):
    def get_by_day_of_week(self, day_of_week: int) -> Optional[WorkSchedule]:
        raise NotImplementedError


class HolidayRepository(Protocol):
    def get_active_on(self, day: date) -> Optional[Holiday]:
        """Active holiday falling exactly on ``day`` (a local calendar date)."""

        raise NotImplementedError
