from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Optional

from ..common.validators import optional_score, require_descriptor, require_non_empty
from ..core.constants import DEFAULT_FACE_THRESHOLD, FACE_DESCRIPTOR_LENGTH
from ..core.enums import ErrorCode
from ..core.exceptions import NotFoundError
from ..employees.repository import EmployeeRepository
from ..settings.service import SettingsService
from .scorer import FaceMatch, FaceSimilarityScorer
from .threshold import AdaptiveThresholdPolicy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VerificationResult:
    match: FaceMatch
    global_threshold: float
    training_score: Optional[float]

    @property
    def message(self) -> str:
        if self.match.accepted:
            return f"Face verified successfully! Similarity: {self.match.similarity}%"
        return (
            f"Face verification failed. Similarity: {self.match.similarity}% "
            f"(required: {self.match.threshold:g}%)"
        )

    def to_dict(self) -> dict:
        return {
            "success": True,
            "match": self.match.accepted,
            "similarity": self.match.similarity,
            "distance": self.match.distance if math.isfinite(self.match.distance) else None,
            "threshold": self.match.threshold,
            "globalThreshold": self.global_threshold,
            "trainingScore": self.training_score,
            "message": self.message,
        }


class FaceVerificationService:
    def __init__(
        self,
        employees: EmployeeRepository,
        settings: SettingsService,
        *,
        scorer: FaceSimilarityScorer | None = None,
        policy: AdaptiveThresholdPolicy | None = None,
        default_threshold: float = DEFAULT_FACE_THRESHOLD,
        descriptor_length: int = FACE_DESCRIPTOR_LENGTH,
    ):
        self._employees = employees
        self._settings = settings
        self._scorer = scorer or FaceSimilarityScorer()
        self._policy = policy or AdaptiveThresholdPolicy()
        self._default_threshold = float(default_threshold)
        self._descriptor_length = int(descriptor_length)

    def _employee(self, employee_id: str):
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError(
                "Employee not found", code=ErrorCode.EMPLOYEE_NOT_FOUND, details={"employeeId": employee_id}
            )
        return employee

    def enroll(self, employee_id: Any, face_descriptor: Any, *, training_score: Any = None) -> None:
        employee_id = require_non_empty(employee_id, "employee_id")
        descriptor = require_descriptor(face_descriptor, length=self._descriptor_length)
        score = optional_score(training_score, "training_score")

        self._employee(employee_id)
        self._employees.save_face_enrollment(employee_id=employee_id, descriptor=descriptor, training_score=score)
        logger.info("Face enrolled for employee %s (training score %s)", employee_id, score)

    def verify(self, employee_id: Any, face_descriptor: Any) -> VerificationResult:
        employee_id = require_non_empty(employee_id, "employee_id")
        descriptor = require_descriptor(face_descriptor, length=self._descriptor_length)

        employee = self._employee(employee_id)
        if not employee.is_enrolled:
            raise NotFoundError(
                "No face encoding found for this employee. Please register your face first.",
                code=ErrorCode.NO_ENROLLMENT,
                details={"employeeId": employee_id},
            )

        # Read fresh on every attempt; administrators may change it between attempts.
        global_threshold = self._settings.snapshot().face_threshold
        if global_threshold is None:
            global_threshold = self._default_threshold

        threshold = self._policy.resolve(global_threshold, employee.face_training_score)
        match = self._scorer.decide(descriptor, employee.face_descriptor, threshold=threshold)
        logger.info(
            "Face verification for %s: similarity=%.2f threshold=%g accepted=%s",
            employee_id,
            match.similarity,
            threshold,
            match.accepted,
        )
        return VerificationResult(match=match, global_threshold=global_threshold, training_score=employee.face_training_score)
