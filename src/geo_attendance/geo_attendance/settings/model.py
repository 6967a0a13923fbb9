from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SystemSetting:
    setting_key: str
    setting_value: Optional[str]
    description: Optional[str] = None


@dataclass(frozen=True)
class SettingsSnapshot:
    """Point-in-time view of the global fallback settings, read once per request.

    ``None`` means the setting row is missing or unreadable.
    """

    default_radius_m: Optional[float]
    face_threshold: Optional[float]
