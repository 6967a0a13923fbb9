from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional, Sequence

from ..common.datetime_utils import ensure_utc
from ..core.enums import AttendanceStatus, StatusDetail
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AttendanceRecord, NewAttendance
from .repository import AttendanceRepository

_COLUMNS = """
    attendance_id, employee_id, check_in_time, check_in_latitude, check_in_longitude,
    office_location_id, face_match_score, status, status_detail, notes,
    check_out_time, check_out_latitude, check_out_longitude
"""


def _db_time(value: datetime) -> datetime:
    # DATETIME columns hold naive UTC
    return ensure_utc(value).replace(tzinfo=None)


def _opt_float(value: Any) -> Optional[float]:
    return float(value) if value is not None else None


def _to_record(r: Dict[str, Any]) -> AttendanceRecord:
    check_out = r.get("check_out_time")
    return AttendanceRecord(
        attendance_id=int(r["attendance_id"]),
        employee_id=str(r["employee_id"]),
        check_in_time=ensure_utc(r["check_in_time"]),
        check_in_latitude=float(r["check_in_latitude"]),
        check_in_longitude=float(r["check_in_longitude"]),
        office_location_id=r.get("office_location_id"),
        face_match_score=_opt_float(r.get("face_match_score")),
        status=AttendanceStatus(r["status"]),
        status_detail=StatusDetail(r["status_detail"]),
        notes=r.get("notes"),
        check_out_time=ensure_utc(check_out) if check_out else None,
        check_out_latitude=_opt_float(r.get("check_out_latitude")),
        check_out_longitude=_opt_float(r.get("check_out_longitude")),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_employee_between(
        self, employee_id: str, start: datetime, end: datetime
    ) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records
                WHERE employee_id=%s AND check_in_time >= %s AND check_in_time < %s
                ORDER BY check_in_time DESC, attendance_id DESC
                """,
                (employee_id, _db_time(start), _db_time(end)),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def create_if_no_open_session(
        self, *, new: NewAttendance, day_start: datetime, day_end: datetime
    ) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            # Row lock on the employee serialises concurrent check-ins for the same person.
            cur.execute("SELECT employee_id FROM employees WHERE employee_id=%s FOR UPDATE", (new.employee_id,))
            fetchone(cur)

            cur.execute(
                """
                SELECT attendance_id
                FROM attendance_records
                WHERE employee_id=%s AND check_in_time >= %s AND check_in_time < %s AND check_out_time IS NULL
                LIMIT 1
                """,
                (new.employee_id, _db_time(day_start), _db_time(day_end)),
            )
            if fetchone(cur):
                return None

            cur.execute(
                """
                INSERT INTO attendance_records(
                    employee_id, check_in_time, check_in_latitude, check_in_longitude,
                    office_location_id, face_match_score, status, status_detail, notes
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    new.employee_id,
                    _db_time(new.check_in_time),
                    new.check_in_latitude,
                    new.check_in_longitude,
                    new.office_location_id,
                    new.face_match_score,
                    new.status.value,
                    new.status_detail.value,
                    new.notes,
                ),
            )
            attendance_id = int(cur.lastrowid)

            cur.execute(f"SELECT {_COLUMNS} FROM attendance_records WHERE attendance_id=%s", (attendance_id,))
            return _to_record(fetchone(cur))

    def close_session(
        self,
        *,
        attendance_id: int,
        check_out_time: datetime,
        latitude: float,
        longitude: float,
        face_match_score: Optional[float] = None,
    ) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE attendance_records
                SET check_out_time=%s, check_out_latitude=%s, check_out_longitude=%s,
                    face_match_score=COALESCE(%s, face_match_score)
                WHERE attendance_id=%s AND check_out_time IS NULL
                """,
                (_db_time(check_out_time), latitude, longitude, face_match_score, int(attendance_id)),
            )
            if cur.rowcount == 0:
                return None

            cur.execute(f"SELECT {_COLUMNS} FROM attendance_records WHERE attendance_id=%s", (int(attendance_id),))
            return _to_record(fetchone(cur))

    def list_between(
        self,
        *,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        employee_id: Optional[str] = None,
        limit: int = 100,
        offset: int = 0,
    ) -> Sequence[AttendanceRecord]:
        clauses = ["1=1"]
        params: list[object] = []

        if start is not None:
            clauses.append("check_in_time >= %s")
            params.append(_db_time(start))
        if end is not None:
            clauses.append("check_in_time < %s")
            params.append(_db_time(end))
        if employee_id is not None:
            clauses.append("employee_id=%s")
            params.append(employee_id)

        where = " AND ".join(clauses)
        params.extend([int(limit), int(offset)])

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records
                WHERE {where}
                ORDER BY check_in_time DESC, attendance_id DESC
                LIMIT %s OFFSET %s
                """,
                tuple(params),
            )
            return [_to_record(r) for r in fetchall(cur)]
