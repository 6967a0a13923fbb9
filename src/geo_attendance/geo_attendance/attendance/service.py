from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Callable, Optional, Sequence
from zoneinfo import ZoneInfo

from ..common.datetime_utils import local_date_bounds, local_day_bounds, local_minutes, now_utc, to_local
from ..common.validators import optional_score, require_coordinates, require_non_empty
from ..core.constants import DEFAULT_HISTORY_LIMIT, MAX_HISTORY_LIMIT
from ..core.enums import AttendanceStatus, ErrorCode, SessionState
from ..core.exceptions import ConflictError, ValidationError
from ..offices.geofence import GeofenceResult, GeofenceValidator
from ..schedules.resolver import HolidayOutcome, NonWorkdayOutcome, ScheduleWindowResolver
from ..settings.service import SettingsService
from .factory import AttendanceStrategyFactory
from .manager import AttendanceRecordManager, out_of_range_error
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CheckInResult:
    record: AttendanceRecord
    message: str
    details: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {"success": True, "data": self.record.to_dict(), "message": self.message, "details": self.details}


@dataclass(frozen=True)
class CheckOutResult:
    record: AttendanceRecord
    message: str
    details: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {"success": True, "data": self.record.to_dict(), "message": self.message, "details": self.details}


@dataclass(frozen=True)
class TodayView:
    records: Sequence[AttendanceRecord]
    state: Optional[SessionState] = None

    def to_dict(self) -> dict:
        out: dict[str, Any] = {"success": True, "data": [r.to_dict() for r in self.records]}
        if self.state is not None:
            out["state"] = self.state.value
        return out


class AttendanceService:
    """Check-In/Check-Out Orchestrator.

    Pipeline: input validation -> geofence -> schedule window -> classification
    -> record manager, which also checks that the employee exists and is active.
    All times are judged in the deployment timezone ``tz``; timestamps are
    stored in UTC.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        manager: AttendanceRecordManager,
        geofence: GeofenceValidator,
        resolver: ScheduleWindowResolver,
        settings: SettingsService,
        *,
        tz: ZoneInfo,
        strategy_factory: AttendanceStrategyFactory | None = None,
        clock: Callable[[], datetime] = now_utc,
    ):
        self._attendance = attendance
        self._manager = manager
        self._geofence = geofence
        self._resolver = resolver
        self._settings = settings
        self._tz = tz
        self._factory = strategy_factory or AttendanceStrategyFactory()
        self._clock = clock

    def _validated_location(self, latitude: Any, longitude: Any) -> tuple[float, float, GeofenceResult]:
        lat, lng = require_coordinates(latitude, longitude)
        result = self._geofence.validate(lat, lng, self._settings.snapshot())
        if not result.valid:
            logger.info(
                "Geofence rejected (%.6f, %.6f): %.0fm from %s, max %gm",
                lat,
                lng,
                result.distance_m,
                result.office.name,
                result.max_radius_m,
            )
            raise out_of_range_error(result)
        return lat, lng, result

    def check_in(
        self,
        employee_id: Any,
        *,
        latitude: Any,
        longitude: Any,
        face_match_score: Any = None,
        location_id: Optional[str] = None,
        now: datetime | None = None,
    ) -> CheckInResult:
        employee_id = require_non_empty(employee_id, "employee_id")
        face_score = optional_score(face_match_score, "face_match_score")
        now = now or self._clock()

        lat, lng, geofence = self._validated_location(latitude, longitude)

        local_now = to_local(now, self._tz)
        outcome = self._resolver.resolve(local_now.date())
        if isinstance(outcome, HolidayOutcome):
            raise ConflictError(
                f"Hari ini adalah hari libur: {outcome.holiday_name}",
                code=ErrorCode.HOLIDAY,
                details={"holiday": outcome.holiday.to_dict()},
            )
        if isinstance(outcome, NonWorkdayOutcome):
            raise ConflictError(
                f"Hari ini ({outcome.day_name}) bukan hari kerja",
                code=ErrorCode.NOT_A_WORKDAY,
                details={"schedule": outcome.schedule.to_dict()},
            )

        window = outcome
        check_in_minutes = local_minutes(now, self._tz)
        if window.is_too_early(check_in_minutes):
            logger.info("Too-early check-in for %s at %s (start %s)", employee_id, local_now.strftime("%H:%M"), window.band_start)
            raise ConflictError(
                f"Terlalu pagi untuk check-in. Rentang jam masuk dimulai pukul {window.band_start}. "
                "Check-in diizinkan maksimal 1 jam sebelum jam mulai.",
                code=ErrorCode.TOO_EARLY,
                details={"schedule": window.schedule.to_dict()},
            )

        classification = self._factory.classify(check_in_minutes=check_in_minutes, window=window)
        record = self._manager.open_session(
            employee_id=employee_id,
            now=now,
            latitude=lat,
            longitude=lng,
            geofence=geofence,
            classification=classification,
            face_score=face_score,
            location_id=location_id,
        )
        logger.info(
            "Check-in %s: status=%s detail=%s distance=%.0fm",
            employee_id,
            classification.status.value,
            classification.detail.value,
            geofence.distance_m,
        )

        message = "Check-in berhasil!"
        if classification.status == AttendanceStatus.LATE:
            message = f"Check-in berhasil (Terlambat {classification.late_minutes} menit)"

        return CheckInResult(
            record=record,
            message=message,
            details={
                "status": classification.status.value,
                "statusDetail": classification.detail.value,
                "lateDuration": classification.late_minutes,
                "workSchedule": window.label(),
                "lateToleranceMinutes": window.schedule.late_tolerance_minutes,
                "location": geofence.summary(),
            },
        )

    def check_out(
        self,
        employee_id: Any,
        *,
        latitude: Any,
        longitude: Any,
        face_match_score: Any = None,
        now: datetime | None = None,
    ) -> CheckOutResult:
        employee_id = require_non_empty(employee_id, "employee_id")
        face_score = optional_score(face_match_score, "face_match_score")
        now = now or self._clock()

        lat, lng, geofence = self._validated_location(latitude, longitude)

        record = self._manager.close_session(
            employee_id=employee_id,
            now=now,
            latitude=lat,
            longitude=lng,
            geofence=geofence,
            face_score=face_score,
        )
        logger.info("Check-out %s: attendance=%s distance=%.0fm", employee_id, record.attendance_id, geofence.distance_m)

        return CheckOutResult(
            record=record,
            message="Check-out berhasil!",
            details={
                "checkOutTime": record.check_out_time.isoformat(),
                "location": geofence.summary(),
            },
        )

    def today(self, employee_id: Optional[str] = None, *, now: datetime | None = None) -> TodayView:
        now = now or self._clock()
        start, end = local_day_bounds(now, self._tz)
        records = self._attendance.list_between(
            start=start, end=end, employee_id=employee_id or None, limit=MAX_HISTORY_LIMIT
        )
        if not employee_id:
            return TodayView(records=records)

        if any(r.is_open for r in records):
            state = SessionState.CHECKED_IN
        elif records:
            state = SessionState.CHECKED_OUT
        else:
            state = SessionState.NOT_CHECKED_IN
        return TodayView(records=records, state=state)

    def history(
        self,
        employee_id: Optional[str] = None,
        *,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        limit: int = DEFAULT_HISTORY_LIMIT,
        offset: int = 0,
    ) -> Sequence[AttendanceRecord]:
        if start_date and end_date and end_date < start_date:
            raise ValidationError("end_date must not be before start_date")
        if int(limit) <= 0 or int(offset) < 0:
            raise ValidationError("limit must be positive and offset non-negative")

        start = local_date_bounds(start_date, self._tz)[0] if start_date else None
        end = local_date_bounds(end_date, self._tz)[1] if end_date else None
        return self._attendance.list_between(
            start=start,
            end=end,
            employee_id=employee_id or None,
            limit=min(int(limit), MAX_HISTORY_LIMIT),
            offset=int(offset),
        )
