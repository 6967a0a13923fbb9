from __future__ import annotations

from typing import Mapping, Protocol, Sequence

from .model import SystemSetting


class SettingsRepository(Protocol):
    def get_many(self, keys: Sequence[str]) -> Mapping[str, SystemSetting]:
        """Return the settings found among ``keys``; missing keys are simply absent."""

        raise NotImplementedError
