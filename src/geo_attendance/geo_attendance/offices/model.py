from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class OfficeLocation:
    """Domain entity: an office with its geofence boundary.

    ``radius`` of ``None``/0 means "use the global default radius".
    """

    office_id: str
    name: str
    latitude: float
    longitude: float
    radius: Optional[float] = None
    is_active: bool = True
