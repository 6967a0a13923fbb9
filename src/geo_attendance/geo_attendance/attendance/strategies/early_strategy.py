from __future__ import annotations

from ...core.enums import AttendanceStatus, StatusDetail
from ...schedules.resolver import WorkWindow
from .base import AttendanceStrategy, Classification


class EarlyArrivalStrategy(AttendanceStrategy):
    """Arrival before shift start (inside the early-arrival buffer); never penalised."""

    def classify(self, *, check_in_minutes: int, window: WorkWindow) -> Classification:
        return Classification(status=AttendanceStatus.PRESENT, detail=StatusDetail.ON_TIME)
