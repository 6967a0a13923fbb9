"""GeoFence Validator.

Accepts or rejects a coordinate against the active office boundary using the
haversine great-circle distance on a spherical Earth.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional

from ..core.constants import EARTH_RADIUS_METERS
from ..core.enums import ErrorCode
from ..core.exceptions import NotFoundError, SystemUnavailableError
from ..settings.model import SettingsSnapshot
from .model import OfficeLocation
from .repository import OfficeLocationRepository

logger = logging.getLogger(__name__)


def haversine_distance(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Great-circle distance in meters between two points given in degrees."""
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lng2 - lng1)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    return 2 * EARTH_RADIUS_METERS * math.atan2(math.sqrt(a), math.sqrt(1 - a))


@dataclass(frozen=True)
class GeofenceResult:
    valid: bool
    office: OfficeLocation
    distance_m: float
    max_radius_m: float
    reason: Optional[ErrorCode] = None

    def summary(self) -> dict:
        return {
            "office": self.office.name,
            "distance": f"{self.distance_m:.0f}m",
            "maxRadius": f"{self.max_radius_m:g}m",
        }


class GeofenceValidator:
    def __init__(self, offices: OfficeLocationRepository):
        self._offices = offices

    def _active_office(self) -> OfficeLocation:
        active = list(self._offices.list_active())
        if not active:
            raise NotFoundError("Tidak ada lokasi kantor aktif", code=ErrorCode.NO_ACTIVE_OFFICE)
        if len(active) > 1:
            logger.warning(
                "%d active office locations configured, using %s (%s)",
                len(active),
                active[0].name,
                active[0].office_id,
            )
        return active[0]

    @staticmethod
    def _max_radius(office: OfficeLocation, settings: SettingsSnapshot) -> float:
        if office.radius and math.isfinite(office.radius) and office.radius > 0:
            return float(office.radius)
        default = settings.default_radius_m
        if default is None or not math.isfinite(default) or default <= 0:
            raise SystemUnavailableError(
                "Gagal mengambil pengaturan GPS radius", code=ErrorCode.SETTINGS_UNAVAILABLE
            )
        return float(default)

    def validate(self, latitude: float, longitude: float, settings: SettingsSnapshot) -> GeofenceResult:
        office = self._active_office()
        max_radius = self._max_radius(office, settings)
        distance = haversine_distance(latitude, longitude, office.latitude, office.longitude)

        if distance > max_radius:
            return GeofenceResult(
                valid=False,
                office=office,
                distance_m=distance,
                max_radius_m=max_radius,
                reason=ErrorCode.OUT_OF_RANGE,
            )
        return GeofenceResult(valid=True, office=office, distance_m=distance, max_radius_m=max_radius)
