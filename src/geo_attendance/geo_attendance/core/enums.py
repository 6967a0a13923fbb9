from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Status stored on an attendance record at check-in time."""

    PRESENT = "present"
    LATE = "late"


class StatusDetail(str, Enum):
    """Punctuality band a check-in fell into."""

    ON_TIME = "on_time"
    WITHIN_TOLERANCE = "within_tolerance"
    LATE_BEYOND = "late_beyond"


class SessionState(str, Enum):
    NOT_CHECKED_IN = "not_checked_in"
    CHECKED_IN = "checked_in"
    CHECKED_OUT = "checked_out"


class ErrorCode(str, Enum):
    """Machine-readable error identifiers returned to API callers."""

    INVALID_INPUT = "invalid_input"
    INVALID_COORDINATES = "invalid_coordinates"
    DESCRIPTOR_LENGTH_MISMATCH = "descriptor_length_mismatch"

    EMPLOYEE_NOT_FOUND = "employee_not_found"
    NO_ACTIVE_OFFICE = "no_active_office"
    SCHEDULE_NOT_CONFIGURED = "schedule_not_configured"
    NO_ENROLLMENT = "no_enrollment"
    NO_OPEN_SESSION = "no_open_session"

    EMPLOYEE_INACTIVE = "employee_inactive"
    OUT_OF_RANGE = "out_of_range"
    HOLIDAY = "holiday"
    NOT_A_WORKDAY = "not_a_workday"
    TOO_EARLY = "too_early"
    ALREADY_CHECKED_IN = "already_checked_in"
    ALREADY_CHECKED_OUT = "already_checked_out"

    SETTINGS_UNAVAILABLE = "settings_unavailable"
    PERSISTENCE_UNAVAILABLE = "persistence_unavailable"
    INTERNAL = "internal_error"
