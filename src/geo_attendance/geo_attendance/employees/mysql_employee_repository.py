from __future__ import annotations

import json
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import Employee
from .repository import EmployeeRepository


def _decode_descriptor(raw) -> Optional[tuple]:
    if not raw:
        return None
    values = json.loads(raw)
    return tuple(float(v) for v in values)


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, full_name, is_active, face_descriptor, face_training_score
                FROM employees
                WHERE employee_id=%s
                """,
                (employee_id,),
            )
            row = fetchone(cur)
            if not row:
                return None
            score = row.get("face_training_score")
            return Employee(
                employee_id=str(row["employee_id"]),
                full_name=row["full_name"],
                is_active=bool(row.get("is_active", True)),
                face_descriptor=_decode_descriptor(row.get("face_descriptor")),
                face_training_score=float(score) if score is not None else None,
            )

    def save_face_enrollment(
        self,
        *,
        employee_id: str,
        descriptor: Sequence[float],
        training_score: Optional[float] = None,
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE employees
                SET face_descriptor=%s, face_training_score=%s
                WHERE employee_id=%s
                """,
                (json.dumps(list(descriptor)), training_score, employee_id),
            )
            return cur.rowcount > 0
