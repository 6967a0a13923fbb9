from __future__ import annotations

from ...core.enums import AttendanceStatus, StatusDetail
from ...schedules.resolver import WorkWindow
from .base import AttendanceStrategy, Classification


class ToleranceStrategy(AttendanceStrategy):
    """Arrival inside the grace band: still present, but flagged."""

    def classify(self, *, check_in_minutes: int, window: WorkWindow) -> Classification:
        minutes_after_start = check_in_minutes - window.start_minutes
        return Classification(
            status=AttendanceStatus.PRESENT,
            detail=StatusDetail.WITHIN_TOLERANCE,
            note=f"Hadir dalam toleransi (+{minutes_after_start} menit)",
        )
