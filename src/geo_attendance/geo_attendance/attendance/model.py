from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import AttendanceStatus, StatusDetail


def _iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one check-in/check-out session.

    Timestamps are aware UTC datetimes. ``status``/``status_detail``/``notes``
    are fixed at check-in and never recomputed.
    """

    attendance_id: int
    employee_id: str
    check_in_time: datetime
    check_in_latitude: float
    check_in_longitude: float
    status: AttendanceStatus
    status_detail: StatusDetail
    office_location_id: Optional[str] = None
    face_match_score: Optional[float] = None
    notes: Optional[str] = None
    check_out_time: Optional[datetime] = None
    check_out_latitude: Optional[float] = None
    check_out_longitude: Optional[float] = None

    @property
    def is_open(self) -> bool:
        return self.check_out_time is None

    def to_dict(self) -> dict:
        return {
            "id": self.attendance_id,
            "employeeId": self.employee_id,
            "checkInTime": _iso(self.check_in_time),
            "checkInLatitude": self.check_in_latitude,
            "checkInLongitude": self.check_in_longitude,
            "officeLocationId": self.office_location_id,
            "faceMatchScore": self.face_match_score,
            "status": self.status.value,
            "statusDetail": self.status_detail.value,
            "notes": self.notes,
            "checkOutTime": _iso(self.check_out_time),
            "checkOutLatitude": self.check_out_latitude,
            "checkOutLongitude": self.check_out_longitude,
        }


@dataclass(frozen=True)
class NewAttendance:
    employee_id: str
    check_in_time: datetime
    check_in_latitude: float
    check_in_longitude: float
    status: AttendanceStatus
    status_detail: StatusDetail
    office_location_id: Optional[str] = None
    face_match_score: Optional[float] = None
    notes: Optional[str] = None
