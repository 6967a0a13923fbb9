from __future__ import annotations

from typing import Protocol, Sequence

from .model import OfficeLocation


class OfficeLocationRepository(Protocol):
    def list_active(self) -> Sequence[OfficeLocation]:
        """Active offices, oldest first."""

        raise NotImplementedError
