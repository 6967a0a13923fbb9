from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class AdaptiveThresholdPolicy:
    """Blend the global threshold with an employee's enrollment (training) score.

    Without a training score the global threshold applies unchanged. With one,
    the threshold is lowered to ``training_score - margin`` when that is below
    the global value, but never below ``floor``.
    """

    margin: float = 10.0
    floor: float = 60.0

    def resolve(self, global_threshold: float, training_score: Optional[float] = None) -> float:
        if training_score is None:
            return float(global_threshold)
        adaptive = min(float(global_threshold), float(training_score) - self.margin)
        return max(self.floor, adaptive)
