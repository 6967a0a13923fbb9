from __future__ import annotations

from typing import Mapping, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import SystemSetting
from .repository import SettingsRepository


class MySQLSettingsRepository(SettingsRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_many(self, keys: Sequence[str]) -> Mapping[str, SystemSetting]:
        keys = list(keys)
        if not keys:
            return {}
        placeholders = ",".join(["%s"] * len(keys))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT setting_key, setting_value, description
                FROM system_settings
                WHERE setting_key IN ({placeholders})
                """,
                tuple(keys),
            )
            return {
                r["setting_key"]: SystemSetting(
                    setting_key=r["setting_key"],
                    setting_value=r.get("setting_value"),
                    description=r.get("description"),
                )
                for r in fetchall(cur)
            }
