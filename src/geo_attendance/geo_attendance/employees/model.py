from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    Note: plain data object, no DB access code. ``face_descriptor`` is the
    enrolled biometric signature; ``face_training_score`` is the similarity
    reached during enrollment, if any.
    """

    employee_id: str
    full_name: str
    is_active: bool = True
    face_descriptor: Optional[Tuple[float, ...]] = None
    face_training_score: Optional[float] = None

    @property
    def is_enrolled(self) -> bool:
        return bool(self.face_descriptor)
