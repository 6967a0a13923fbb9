from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord, NewAttendance


class AttendanceRepository(Protocol):
    def list_for_employee_between(
        self, employee_id: str, start: datetime, end: datetime
    ) -> Sequence[AttendanceRecord]:
        """Records with ``start <= check_in_time < end``, most recent check-in first."""

        raise NotImplementedError

    def create_if_no_open_session(
        self, *, new: NewAttendance, day_start: datetime, day_end: datetime
    ) -> Optional[AttendanceRecord]:
        """Insert ``new`` unless the employee already has an open session in ``[day_start, day_end)``.

        The check and the insert must be atomic. Returns ``None`` when an open
        session already exists.
        """

        raise NotImplementedError

    def close_session(
        self,
        *,
        attendance_id: int,
        check_out_time: datetime,
        latitude: float,
        longitude: float,
        face_match_score: Optional[float] = None,
    ) -> Optional[AttendanceRecord]:
        """Set the check-out fields only if the record is still open.

        Returns the updated record, or ``None`` when it was already closed.
        """

        raise NotImplementedError

    def list_between(
        self,
        *,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        employee_id: Optional[str] = None,
        limit: int = 100,
        offset: int = 0,
    ) -> Sequence[AttendanceRecord]:
        raise NotImplementedError
