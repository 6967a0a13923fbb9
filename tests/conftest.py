from __future__ import annotations

import threading
from dataclasses import dataclass, field, replace
from datetime import date, datetime, timezone
from typing import Optional
from zoneinfo import ZoneInfo

import pytest

from geo_attendance.attendance.model import AttendanceRecord, NewAttendance
from geo_attendance.container import assemble
from geo_attendance.employees.model import Employee
from geo_attendance.offices.model import OfficeLocation
from geo_attendance.schedules.model import Holiday, WorkSchedule
from geo_attendance.settings.model import SystemSetting

# Office "Kantor Pusat" in Jakarta.
OFFICE_LAT = -6.2088
OFFICE_LNG = 106.8456


@dataclass
class InMemoryEmployees:
    employees: dict[str, Employee] = field(default_factory=dict)
    lookups: int = 0

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        self.lookups += 1
        return self.employees.get(employee_id)

    def save_face_enrollment(self, *, employee_id, descriptor, training_score=None) -> bool:
        emp = self.employees.get(employee_id)
        if not emp:
            return False
        self.employees[employee_id] = replace(
            emp,
            face_descriptor=tuple(descriptor),
            face_training_score=training_score,
        )
        return True


@dataclass
class InMemoryOffices:
    offices: list[OfficeLocation] = field(default_factory=list)

    def list_active(self):
        return [o for o in self.offices if o.is_active]


@dataclass
class InMemorySchedules:
    by_day: dict[int, WorkSchedule] = field(default_factory=dict)

    def get_by_day_of_week(self, day_of_week: int) -> Optional[WorkSchedule]:
        return self.by_day.get(day_of_week)


@dataclass
class InMemoryHolidays:
    holidays: list[Holiday] = field(default_factory=list)

    def get_active_on(self, day: date) -> Optional[Holiday]:
        for h in self.holidays:
            if h.is_active and h.holiday_date == day:
                return h
        return None


@dataclass
class InMemorySettings:
    values: dict[str, str] = field(default_factory=dict)
    reads: int = 0

    def get_many(self, keys):
        self.reads += 1
        return {
            k: SystemSetting(setting_key=k, setting_value=self.values[k])
            for k in keys
            if k in self.values
        }


class InMemoryAttendance:
    def __init__(self):
        self.records: dict[int, AttendanceRecord] = {}
        self._id = 0
        self._lock = threading.Lock()

    def add(self, record: AttendanceRecord) -> AttendanceRecord:
        self.records[record.attendance_id] = record
        self._id = max(self._id, record.attendance_id)
        return record

    def list_for_employee_between(self, employee_id, start, end):
        items = [
            r for r in self.records.values()
            if r.employee_id == employee_id and start <= r.check_in_time < end
        ]
        items.sort(key=lambda r: (r.check_in_time, r.attendance_id), reverse=True)
        return items

    def create_if_no_open_session(self, *, new: NewAttendance, day_start, day_end):
        with self._lock:
            for r in self.list_for_employee_between(new.employee_id, day_start, day_end):
                if r.is_open:
                    return None
            self._id += 1
            rec = AttendanceRecord(attendance_id=self._id, **vars(new))
            self.records[rec.attendance_id] = rec
            return rec

    def close_session(self, *, attendance_id, check_out_time, latitude, longitude, face_match_score=None):
        with self._lock:
            rec = self.records.get(attendance_id)
            if rec is None or not rec.is_open:
                return None
            rec = replace(
                rec,
                check_out_time=check_out_time,
                check_out_latitude=latitude,
                check_out_longitude=longitude,
                face_match_score=face_match_score if face_match_score is not None else rec.face_match_score,
            )
            self.records[attendance_id] = rec
            return rec

    def list_between(self, *, start=None, end=None, employee_id=None, limit=100, offset=0):
        items = [
            r for r in self.records.values()
            if (start is None or r.check_in_time >= start)
            and (end is None or r.check_in_time < end)
            and (employee_id is None or r.employee_id == employee_id)
        ]
        items.sort(key=lambda r: (r.check_in_time, r.attendance_id), reverse=True)
        return items[offset:offset + limit]


def weekday_schedule(day_of_week: int, **overrides) -> WorkSchedule:
    values = dict(
        day_of_week=day_of_week,
        day_name=["Minggu", "Senin", "Selasa", "Rabu", "Kamis", "Jumat", "Sabtu"][day_of_week],
        start_time="09:00",
        end_time="17:00",
        is_active=day_of_week not in (0, 6),
        late_tolerance_minutes=15,
    )
    values.update(overrides)
    return WorkSchedule(**values)


def jakarta(year, month, day, hour, minute, second=0) -> datetime:
    """UTC instant for a wall-clock time in Asia/Jakarta."""
    local = datetime(year, month, day, hour, minute, second, tzinfo=ZoneInfo("Asia/Jakarta"))
    return local.astimezone(timezone.utc)


class Clock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def clock():
    # Monday 2026-02-02, 09:00 in Jakarta
    return Clock(jakarta(2026, 2, 2, 9, 0))


@pytest.fixture
def employees():
    return InMemoryEmployees(
        {
            "emp-1": Employee(employee_id="emp-1", full_name="Budi Santoso"),
            "emp-2": Employee(employee_id="emp-2", full_name="Siti Rahayu"),
            "emp-off": Employee(employee_id="emp-off", full_name="Nonaktif", is_active=False),
        }
    )


@pytest.fixture
def offices():
    return InMemoryOffices(
        [OfficeLocation(office_id="office-hq", name="Kantor Pusat", latitude=OFFICE_LAT, longitude=OFFICE_LNG, radius=100)]
    )


@pytest.fixture
def schedules():
    return InMemorySchedules({d: weekday_schedule(d) for d in range(7)})


@pytest.fixture
def holidays():
    return InMemoryHolidays()


@pytest.fixture
def settings_repo():
    return InMemorySettings({"gps_accuracy_radius": "3000", "face_recognition_threshold": "80"})


@pytest.fixture
def attendance_repo():
    return InMemoryAttendance()


@pytest.fixture
def container(employees, offices, schedules, holidays, settings_repo, attendance_repo, clock):
    return assemble(
        employees_repo=employees,
        offices_repo=offices,
        schedules_repo=schedules,
        holidays_repo=holidays,
        settings_repo=settings_repo,
        attendance_repo=attendance_repo,
        timezone="Asia/Jakarta",
        clock=clock,
    )
