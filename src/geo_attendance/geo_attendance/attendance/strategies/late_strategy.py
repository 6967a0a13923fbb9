from __future__ import annotations

from ...core.enums import AttendanceStatus, StatusDetail
from ...schedules.resolver import WorkWindow
from .base import AttendanceStrategy, Classification


class LateStrategy(AttendanceStrategy):
    """Late check-in."""

    def classify(self, *, check_in_minutes: int, window: WorkWindow) -> Classification:
        late_minutes = check_in_minutes - window.start_minutes
        return Classification(
            status=AttendanceStatus.LATE,
            detail=StatusDetail.LATE_BEYOND,
            late_minutes=late_minutes,
            note=f"Terlambat {late_minutes} menit (melewati batas toleransi: {window.tolerance_end})",
        )
