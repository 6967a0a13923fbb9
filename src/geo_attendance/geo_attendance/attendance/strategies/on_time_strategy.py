from __future__ import annotations

from ...core.enums import AttendanceStatus, StatusDetail
from ...schedules.resolver import WorkWindow
from .base import AttendanceStrategy, Classification


class OnTimeStrategy(AttendanceStrategy):
    """Arrival between shift start and the end of the on-time band."""

    def classify(self, *, check_in_minutes: int, window: WorkWindow) -> Classification:
        lead = max(0, check_in_minutes - window.start_minutes)
        note = f"Tepat waktu (masuk {lead} menit setelah jam mulai)" if lead > 0 else None
        return Classification(status=AttendanceStatus.PRESENT, detail=StatusDetail.ON_TIME, note=note)
