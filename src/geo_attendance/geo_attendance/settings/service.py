from __future__ import annotations

import logging
import math
from typing import Mapping, Optional

from ..core.constants import SETTING_FACE_THRESHOLD, SETTING_GPS_RADIUS
from .model import SettingsSnapshot, SystemSetting
from .repository import SettingsRepository

logger = logging.getLogger(__name__)


def _as_float(settings: Mapping[str, SystemSetting], key: str) -> Optional[float]:
    setting = settings.get(key)
    if setting is None or setting.setting_value is None:
        return None
    try:
        value = float(str(setting.setting_value).strip())
    except ValueError:
        logger.warning("Setting %s has a non-numeric value: %r", key, setting.setting_value)
        return None
    if not math.isfinite(value):
        logger.warning("Setting %s is not finite: %r", key, setting.setting_value)
        return None
    return value


def _radius(settings: Mapping[str, SystemSetting]) -> Optional[float]:
    value = _as_float(settings, SETTING_GPS_RADIUS)
    if value is not None and value <= 0:
        logger.warning("Setting %s must be positive, got %r", SETTING_GPS_RADIUS, value)
        return None
    return value


def _threshold(settings: Mapping[str, SystemSetting]) -> Optional[float]:
    value = _as_float(settings, SETTING_FACE_THRESHOLD)
    if value is not None and not 0 <= value <= 100:
        logger.warning("Setting %s must be within 0..100, got %r", SETTING_FACE_THRESHOLD, value)
        return None
    return value


class SettingsService:
    """Reads the global fallback configuration fresh on every call.

    Values that are missing, non-numeric or out of range come back as ``None``.
    """

    def __init__(self, settings: SettingsRepository):
        self._settings = settings

    def snapshot(self) -> SettingsSnapshot:
        rows = self._settings.get_many([SETTING_GPS_RADIUS, SETTING_FACE_THRESHOLD])
        return SettingsSnapshot(default_radius_m=_radius(rows), face_threshold=_threshold(rows))
