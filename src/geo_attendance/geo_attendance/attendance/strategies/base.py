from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ...core.enums import AttendanceStatus, StatusDetail
from ...schedules.resolver import WorkWindow


@dataclass(frozen=True)
class Classification:
    status: AttendanceStatus
    detail: StatusDetail
    late_minutes: int = 0
    note: Optional[str] = None


class AttendanceStrategy(ABC):
    """Strategy Pattern: encapsulate how we decide a check-in status."""

    @abstractmethod
    def classify(self, *, check_in_minutes: int, window: WorkWindow) -> Classification:
        raise NotImplementedError
