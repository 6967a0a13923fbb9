from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import OfficeLocation
from .repository import OfficeLocationRepository


class MySQLOfficeLocationRepository(OfficeLocationRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_active(self) -> Sequence[OfficeLocation]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT office_id, name, latitude, longitude, radius, is_active
                FROM office_locations
                WHERE is_active=1
                ORDER BY created_at ASC, office_id ASC
                """
            )
            return [
                OfficeLocation(
                    office_id=str(r["office_id"]),
                    name=r["name"],
                    latitude=float(r["latitude"]),
                    longitude=float(r["longitude"]),
                    radius=float(r["radius"]) if r.get("radius") is not None else None,
                    is_active=bool(r.get("is_active", True)),
                )
                for r in fetchall(cur)
            ]
