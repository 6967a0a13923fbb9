from datetime import timedelta
from zoneinfo import ZoneInfo

import pytest

from geo_attendance.attendance.manager import AttendanceRecordManager
from geo_attendance.attendance.model import AttendanceRecord
from geo_attendance.attendance.strategies.base import Classification
from geo_attendance.core.enums import AttendanceStatus, ErrorCode, StatusDetail
from geo_attendance.core.exceptions import ConflictError, NotFoundError
from geo_attendance.offices.geofence import GeofenceResult
from geo_attendance.offices.model import OfficeLocation

from conftest import OFFICE_LAT, OFFICE_LNG, jakarta

OFFICE = OfficeLocation(office_id="office-hq", name="Kantor Pusat", latitude=OFFICE_LAT, longitude=OFFICE_LNG, radius=100)
INSIDE = GeofenceResult(valid=True, office=OFFICE, distance_m=12.0, max_radius_m=100.0)
OUTSIDE = GeofenceResult(valid=False, office=OFFICE, distance_m=450.0, max_radius_m=100.0, reason=ErrorCode.OUT_OF_RANGE)
LATE = Classification(
    status=AttendanceStatus.LATE,
    detail=StatusDetail.LATE_BEYOND,
    late_minutes=35,
    note="Terlambat 35 menit (melewati batas toleransi: 09:30)",
)


@pytest.fixture
def manager(attendance_repo, employees):
    return AttendanceRecordManager(attendance_repo, employees, tz=ZoneInfo("Asia/Jakarta"))


def _open(manager, now, employee_id="emp-1", **kw):
    return manager.open_session(
        employee_id=employee_id,
        now=now,
        latitude=OFFICE_LAT,
        longitude=OFFICE_LNG,
        geofence=kw.pop("geofence", INSIDE),
        classification=kw.pop("classification", LATE),
        **kw,
    )


def _close(manager, now, employee_id="emp-1", **kw):
    return manager.close_session(
        employee_id=employee_id,
        now=now,
        latitude=OFFICE_LAT,
        longitude=OFFICE_LNG,
        geofence=kw.pop("geofence", INSIDE),
        **kw,
    )


def test_open_then_close_keeps_check_in_classification(manager):
    opened = _open(manager, jakarta(2026, 2, 2, 9, 35), face_score=91.5)
    assert opened.is_open
    assert opened.office_location_id == "office-hq"

    closed = _close(manager, jakarta(2026, 2, 2, 17, 5))

    assert closed.attendance_id == opened.attendance_id
    assert closed.check_out_time == jakarta(2026, 2, 2, 17, 5)
    assert closed.status == AttendanceStatus.LATE
    assert closed.status_detail == StatusDetail.LATE_BEYOND
    assert closed.notes == opened.notes
    assert closed.face_match_score == 91.5


def test_location_id_overrides_geofence_office(manager):
    record = _open(manager, jakarta(2026, 2, 2, 9, 0), location_id="office-branch")

    assert record.office_location_id == "office-branch"


def test_second_open_session_same_day_is_rejected(manager):
    _open(manager, jakarta(2026, 2, 2, 9, 0))

    with pytest.raises(ConflictError) as exc:
        _open(manager, jakarta(2026, 2, 2, 9, 5))

    assert exc.value.code == ErrorCode.ALREADY_CHECKED_IN


def test_new_session_allowed_after_previous_closed(manager, attendance_repo):
    _open(manager, jakarta(2026, 2, 2, 8, 0))
    _close(manager, jakarta(2026, 2, 2, 12, 0))

    _open(manager, jakarta(2026, 2, 2, 13, 0))

    assert len(attendance_repo.records) == 2


def test_open_session_on_previous_day_does_not_block(manager):
    _open(manager, jakarta(2026, 2, 2, 9, 0))

    record = _open(manager, jakarta(2026, 2, 3, 9, 0))

    assert record.is_open


def test_close_without_records_is_no_open_session(manager):
    with pytest.raises(NotFoundError) as exc:
        _close(manager, jakarta(2026, 2, 2, 17, 0))

    assert exc.value.code == ErrorCode.NO_OPEN_SESSION


def test_close_twice_is_already_checked_out(manager):
    _open(manager, jakarta(2026, 2, 2, 9, 0))
    _close(manager, jakarta(2026, 2, 2, 17, 0))

    with pytest.raises(ConflictError) as exc:
        _close(manager, jakarta(2026, 2, 2, 17, 1))

    assert exc.value.code == ErrorCode.ALREADY_CHECKED_OUT


def test_close_picks_most_recent_open_session(manager, attendance_repo):
    base = dict(
        employee_id="emp-1",
        check_in_latitude=OFFICE_LAT,
        check_in_longitude=OFFICE_LNG,
        status=AttendanceStatus.PRESENT,
        status_detail=StatusDetail.ON_TIME,
    )
    earlier = jakarta(2026, 2, 2, 8, 0)
    attendance_repo.add(AttendanceRecord(attendance_id=1, check_in_time=earlier, **base))
    attendance_repo.add(AttendanceRecord(attendance_id=2, check_in_time=earlier + timedelta(hours=1), **base))
    attendance_repo.add(AttendanceRecord(attendance_id=3, check_in_time=earlier + timedelta(hours=1), **base))

    closed = _close(manager, jakarta(2026, 2, 2, 17, 0))

    assert closed.attendance_id == 3
    assert attendance_repo.records[1].is_open
    assert attendance_repo.records[2].is_open


def test_session_is_closed_across_utc_midnight(manager):
    # 06:30 Jakarta is 23:30 UTC of the previous day
    _open(manager, jakarta(2026, 2, 2, 6, 30))

    closed = _close(manager, jakarta(2026, 2, 2, 16, 0))

    assert not closed.is_open


def test_out_of_range_is_rejected_before_writing(manager, attendance_repo):
    with pytest.raises(ConflictError) as exc:
        _open(manager, jakarta(2026, 2, 2, 9, 0), geofence=OUTSIDE)

    assert exc.value.code == ErrorCode.OUT_OF_RANGE
    assert exc.value.details == {"distance": 450.0, "maxRadius": 100.0, "office": "Kantor Pusat"}
    assert attendance_repo.records == {}


def test_unknown_employee(manager):
    with pytest.raises(NotFoundError) as exc:
        _open(manager, jakarta(2026, 2, 2, 9, 0), employee_id="nobody")

    assert exc.value.code == ErrorCode.EMPLOYEE_NOT_FOUND


def test_inactive_employee(manager):
    with pytest.raises(ConflictError) as exc:
        _open(manager, jakarta(2026, 2, 2, 9, 0), employee_id="emp-off")

    assert exc.value.code == ErrorCode.EMPLOYEE_INACTIVE
