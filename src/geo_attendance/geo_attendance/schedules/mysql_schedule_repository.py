from __future__ import annotations

from datetime import date
from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone, normalize_hhmm
from .model import Holiday, WorkSchedule
from .repository import HolidayRepository, WorkScheduleRepository


class MySQLWorkScheduleRepository(WorkScheduleRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_day_of_week(self, day_of_week: int) -> Optional[WorkSchedule]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT day_of_week, day_name, start_time, end_time, is_active, late_tolerance_minutes,
                       on_time_end_time, tolerance_start_time, tolerance_end_time
                FROM work_schedules
                WHERE day_of_week=%s
                """,
                (int(day_of_week),),
            )
            r = fetchone(cur)
            if not r:
                return None
            return WorkSchedule(
                day_of_week=int(r["day_of_week"]),
                day_name=r["day_name"],
                start_time=normalize_hhmm(r["start_time"]),
                end_time=normalize_hhmm(r["end_time"]),
                is_active=bool(r.get("is_active", True)),
                late_tolerance_minutes=int(r.get("late_tolerance_minutes") or 0),
                on_time_end_time=normalize_hhmm(r.get("on_time_end_time")),
                tolerance_start_time=normalize_hhmm(r.get("tolerance_start_time")),
                tolerance_end_time=normalize_hhmm(r.get("tolerance_end_time")),
            )


class MySQLHolidayRepository(HolidayRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_active_on(self, day: date) -> Optional[Holiday]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT holiday_id, holiday_date, name, is_active
                FROM holidays
                WHERE holiday_date=%s AND is_active=1
                ORDER BY holiday_id
                LIMIT 1
                """,
                (day,),
            )
            r = fetchone(cur)
            if not r:
                return None
            return Holiday(
                holiday_id=str(r["holiday_id"]),
                holiday_date=r["holiday_date"],
                name=r["name"],
                is_active=bool(r.get("is_active", True)),
            )
