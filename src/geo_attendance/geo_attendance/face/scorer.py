"""Face Similarity Scorer.

Turns the Euclidean distance between two descriptors into a similarity
percentage and applies a single accept/reject comparison.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from ..core.constants import FACE_MAX_DISTANCE
from ..core.enums import ErrorCode
from ..core.exceptions import ValidationError


def euclidean_distance(live: Sequence[float], stored: Sequence[float]) -> float:
    live_vec = np.asarray(live, dtype=float)
    stored_vec = np.asarray(stored, dtype=float)
    if live_vec.shape != stored_vec.shape:
        raise ValidationError(
            "Descriptors must have the same length",
            code=ErrorCode.DESCRIPTOR_LENGTH_MISMATCH,
            details={"live": int(live_vec.size), "stored": int(stored_vec.size)},
        )
    return float(np.linalg.norm(live_vec - stored_vec))


def distance_to_similarity(distance: float, *, max_distance: float = FACE_MAX_DISTANCE) -> float:
    if not math.isfinite(distance):
        return 0.0
    similarity = max(0.0, min(100.0, (1 - distance / max_distance) * 100))
    return round(similarity, 2)


@dataclass(frozen=True)
class FaceMatch:
    distance: float
    similarity: float
    threshold: float

    @property
    def accepted(self) -> bool:
        return self.similarity >= self.threshold


class FaceSimilarityScorer:
    def score(self, live: Sequence[float], stored: Sequence[float]) -> float:
        return distance_to_similarity(euclidean_distance(live, stored))

    def decide(self, live: Sequence[float], stored: Sequence[float], *, threshold: float) -> FaceMatch:
        distance = euclidean_distance(live, stored)
        return FaceMatch(distance=distance, similarity=distance_to_similarity(distance), threshold=float(threshold))
