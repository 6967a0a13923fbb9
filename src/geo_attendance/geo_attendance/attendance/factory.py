from __future__ import annotations

from dataclasses import dataclass

from ..schedules.resolver import WorkWindow
from .strategies.base import AttendanceStrategy, Classification
from .strategies.early_strategy import EarlyArrivalStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.on_time_strategy import OnTimeStrategy
from .strategies.tolerance_strategy import ToleranceStrategy


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: choose the punctuality strategy for a check-in minute.

    Boundary minutes belong to the earlier band.
    """

    def for_checkin(self, *, check_in_minutes: int, window: WorkWindow) -> AttendanceStrategy:
        t = check_in_minutes
        if window.start_minutes <= t <= window.on_time_end_minutes:
            return OnTimeStrategy()
        if window.on_time_end_minutes < t <= window.tolerance_end_minutes:
            return ToleranceStrategy()
        if t > window.tolerance_end_minutes:
            return LateStrategy()
        return EarlyArrivalStrategy()

    def classify(self, *, check_in_minutes: int, window: WorkWindow) -> Classification:
        strategy = self.for_checkin(check_in_minutes=check_in_minutes, window=window)
        return strategy.classify(check_in_minutes=check_in_minutes, window=window)
