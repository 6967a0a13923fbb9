"""Attendance Record Manager.

Owns the daily check-in/check-out state machine: at most one open session per
employee per local calendar day, and a session is closed exactly once.
"""
from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional
from zoneinfo import ZoneInfo

from ..common.datetime_utils import local_day_bounds
from ..core.enums import ErrorCode
from ..core.exceptions import ConflictError, NotFoundError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..offices.geofence import GeofenceResult
from .model import AttendanceRecord, NewAttendance
from .repository import AttendanceRepository
from .strategies.base import Classification

logger = logging.getLogger(__name__)


def out_of_range_error(geofence: GeofenceResult) -> ConflictError:
    return ConflictError(
        f"Anda berada di luar jangkauan kantor "
        f"(jarak: {geofence.distance_m:.0f}m, maksimal: {geofence.max_radius_m:g}m)",
        code=ErrorCode.OUT_OF_RANGE,
        details={
            "distance": geofence.distance_m,
            "maxRadius": geofence.max_radius_m,
            "office": geofence.office.name,
        },
    )


class AttendanceRecordManager:
    def __init__(self, attendance: AttendanceRepository, employees: EmployeeRepository, *, tz: ZoneInfo):
        self._attendance = attendance
        self._employees = employees
        self._tz = tz

    def require_active_employee(self, employee_id: str) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError(
                "Karyawan tidak ditemukan",
                code=ErrorCode.EMPLOYEE_NOT_FOUND,
                details={"employeeId": employee_id},
            )
        if not employee.is_active:
            raise ConflictError(
                "Karyawan tidak aktif",
                code=ErrorCode.EMPLOYEE_INACTIVE,
                details={"employeeId": employee_id},
            )
        return employee

    @staticmethod
    def _require_in_range(geofence: GeofenceResult) -> None:
        if not geofence.valid:
            raise out_of_range_error(geofence)

    def open_session(
        self,
        *,
        employee_id: str,
        now: datetime,
        latitude: float,
        longitude: float,
        geofence: GeofenceResult,
        classification: Classification,
        face_score: Optional[float] = None,
        location_id: Optional[str] = None,
    ) -> AttendanceRecord:
        self.require_active_employee(employee_id)
        self._require_in_range(geofence)

        day_start, day_end = local_day_bounds(now, self._tz)
        record = self._attendance.create_if_no_open_session(
            new=NewAttendance(
                employee_id=employee_id,
                check_in_time=now,
                check_in_latitude=latitude,
                check_in_longitude=longitude,
                office_location_id=location_id or geofence.office.office_id,
                face_match_score=face_score,
                status=classification.status,
                status_detail=classification.detail,
                notes=classification.note,
            ),
            day_start=day_start,
            day_end=day_end,
        )
        if record is None:
            raise ConflictError("Anda sudah check-in hari ini", code=ErrorCode.ALREADY_CHECKED_IN)
        return record

    def close_session(
        self,
        *,
        employee_id: str,
        now: datetime,
        latitude: float,
        longitude: float,
        geofence: GeofenceResult,
        face_score: Optional[float] = None,
    ) -> AttendanceRecord:
        self.require_active_employee(employee_id)
        self._require_in_range(geofence)

        day_start, day_end = local_day_bounds(now, self._tz)
        todays = list(self._attendance.list_for_employee_between(employee_id, day_start, day_end))
        open_sessions = [r for r in todays if r.is_open]

        if not open_sessions:
            if todays:
                raise ConflictError(
                    "Anda sudah melakukan check-out hari ini",
                    code=ErrorCode.ALREADY_CHECKED_OUT,
                    details={"checkOutTime": todays[0].check_out_time.isoformat()},
                )
            raise NotFoundError(
                "Tidak ada data check-in untuk hari ini. Silakan lakukan check-in terlebih dahulu.",
                code=ErrorCode.NO_OPEN_SESSION,
            )

        selected = max(open_sessions, key=lambda r: (r.check_in_time, r.attendance_id))
        if len(open_sessions) > 1:
            logger.warning(
                "Integrity anomaly: %d open sessions for employee %s today, closing most recent (id=%s)",
                len(open_sessions),
                employee_id,
                selected.attendance_id,
            )

        updated = self._attendance.close_session(
            attendance_id=selected.attendance_id,
            check_out_time=now,
            latitude=latitude,
            longitude=longitude,
            face_match_score=face_score,
        )
        if updated is None:
            raise ConflictError("Anda sudah melakukan check-out hari ini", code=ErrorCode.ALREADY_CHECKED_OUT)
        return updated
