from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional
from zoneinfo import ZoneInfo

from .attendance.factory import AttendanceStrategyFactory
from .attendance.manager import AttendanceRecordManager
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .common.datetime_utils import now_utc
from .core.constants import (
    DEFAULT_FACE_MIN_THRESHOLD,
    DEFAULT_FACE_THRESHOLD,
    DEFAULT_FACE_TRAINING_MARGIN,
    DEFAULT_TIMEZONE,
)
from .database.connection import DatabaseConnection, DBConfig
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .face.service import FaceVerificationService
from .face.threshold import AdaptiveThresholdPolicy
from .offices.geofence import GeofenceValidator
from .offices.mysql_office_repository import MySQLOfficeLocationRepository
from .offices.repository import OfficeLocationRepository
from .schedules.mysql_schedule_repository import MySQLHolidayRepository, MySQLWorkScheduleRepository
from .schedules.repository import HolidayRepository, WorkScheduleRepository
from .schedules.resolver import ScheduleWindowResolver
from .settings.mysql_settings_repository import MySQLSettingsRepository
from .settings.repository import SettingsRepository
from .settings.service import SettingsService


@dataclass(frozen=True)
class Container:
    tz: ZoneInfo

    employees_repo: EmployeeRepository
    offices_repo: OfficeLocationRepository
    schedules_repo: WorkScheduleRepository
    holidays_repo: HolidayRepository
    settings_repo: SettingsRepository
    attendance_repo: AttendanceRepository

    settings_service: SettingsService
    geofence: GeofenceValidator
    resolver: ScheduleWindowResolver
    record_manager: AttendanceRecordManager
    attendance_service: AttendanceService
    face_service: FaceVerificationService

    conn: Optional[DatabaseConnection] = None


def assemble(
    *,
    employees_repo: EmployeeRepository,
    offices_repo: OfficeLocationRepository,
    schedules_repo: WorkScheduleRepository,
    holidays_repo: HolidayRepository,
    settings_repo: SettingsRepository,
    attendance_repo: AttendanceRepository,
    timezone: str = DEFAULT_TIMEZONE,
    default_face_threshold: float = DEFAULT_FACE_THRESHOLD,
    face_training_margin: float = DEFAULT_FACE_TRAINING_MARGIN,
    face_min_threshold: float = DEFAULT_FACE_MIN_THRESHOLD,
    clock: Callable[[], datetime] = now_utc,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    """Wire services over any set of repositories (MySQL in production, fakes in tests)."""

    tz = ZoneInfo(timezone)

    settings_service = SettingsService(settings_repo)
    geofence = GeofenceValidator(offices_repo)
    resolver = ScheduleWindowResolver(schedules_repo, holidays_repo)
    record_manager = AttendanceRecordManager(attendance_repo, employees_repo, tz=tz)
    attendance_service = AttendanceService(
        attendance_repo,
        record_manager,
        geofence,
        resolver,
        settings_service,
        tz=tz,
        strategy_factory=AttendanceStrategyFactory(),
        clock=clock,
    )
    face_service = FaceVerificationService(
        employees_repo,
        settings_service,
        policy=AdaptiveThresholdPolicy(margin=face_training_margin, floor=face_min_threshold),
        default_threshold=default_face_threshold,
    )

    return Container(
        tz=tz,
        employees_repo=employees_repo,
        offices_repo=offices_repo,
        schedules_repo=schedules_repo,
        holidays_repo=holidays_repo,
        settings_repo=settings_repo,
        attendance_repo=attendance_repo,
        settings_service=settings_service,
        geofence=geofence,
        resolver=resolver,
        record_manager=record_manager,
        attendance_service=attendance_service,
        face_service=face_service,
        conn=conn,
    )


def build_container(*, db_config: dict, **options) -> Container:
    config = DBConfig(
        host=str(db_config["host"]),
        port=int(db_config.get("port", 3306)),
        user=str(db_config["user"]),
        password=str(db_config["password"]),
        database=str(db_config["database"]),
    )
    conn = DatabaseConnection(config)

    return assemble(
        employees_repo=MySQLEmployeeRepository(conn),
        offices_repo=MySQLOfficeLocationRepository(conn),
        schedules_repo=MySQLWorkScheduleRepository(conn),
        holidays_repo=MySQLHolidayRepository(conn),
        settings_repo=MySQLSettingsRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        conn=conn,
        **options,
    )
