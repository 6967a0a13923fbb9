from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class WorkSchedule:
    """Domain entity: the working hours for one weekday (0=Sunday..6=Saturday).

    Band boundaries left as ``None`` are derived from ``late_tolerance_minutes``.
    """

    day_of_week: int
    day_name: str
    start_time: str
    end_time: str
    is_active: bool = True
    late_tolerance_minutes: int = 0
    on_time_end_time: Optional[str] = None
    tolerance_start_time: Optional[str] = None
    tolerance_end_time: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "dayOfWeek": self.day_of_week,
            "dayName": self.day_name,
            "startTime": self.start_time,
            "endTime": self.end_time,
            "isActive": self.is_active,
            "lateToleranceMinutes": self.late_tolerance_minutes,
            "onTimeEndTime": self.on_time_end_time,
            "toleranceStartTime": self.tolerance_start_time,
            "toleranceEndTime": self.tolerance_end_time,
        }


@dataclass(frozen=True)
class Holiday:
    holiday_id: str
    holiday_date: date
    name: str
    is_active: bool = True

    def to_dict(self) -> dict:
        return {
            "id": self.holiday_id,
            "date": self.holiday_date.isoformat(),
            "name": self.name,
            "isActive": self.is_active,
        }
