from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    Note (DIP): the service layer depends on this interface, not on a concrete DB.
    """

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def save_face_enrollment(
        self,
        *,
        employee_id: str,
        descriptor: Sequence[float],
        training_score: Optional[float] = None,
    ) -> bool:
        """Replace the descriptor and its training score (``None`` clears the score)."""

        raise NotImplementedError
