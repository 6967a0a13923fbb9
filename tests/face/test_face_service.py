from dataclasses import replace

import pytest

from geo_attendance.core.enums import ErrorCode
from geo_attendance.core.exceptions import NotFoundError, ValidationError


def _descriptor(first=0.0):
    return [first] + [0.0] * 127


def test_enroll_then_verify_same_face(container, employees):
    container.face_service.enroll("emp-1", _descriptor())

    assert employees.get_by_id("emp-1").is_enrolled
    result = container.face_service.verify("emp-1", _descriptor())

    assert result.match.accepted
    assert result.match.similarity == 100.0
    assert result.to_dict()["message"] == "Face verified successfully! Similarity: 100.0%"


def test_verify_rejects_different_face(container):
    container.face_service.enroll("emp-1", _descriptor())

    result = container.face_service.verify("emp-1", _descriptor(0.6))

    assert not result.match.accepted
    assert result.to_dict()["match"] is False
    assert result.to_dict()["threshold"] == 80.0


def test_verify_without_enrollment(container):
    with pytest.raises(NotFoundError) as exc:
        container.face_service.verify("emp-1", _descriptor())

    assert exc.value.code == ErrorCode.NO_ENROLLMENT


def test_enroll_unknown_employee(container):
    with pytest.raises(NotFoundError) as exc:
        container.face_service.enroll("nobody", _descriptor())

    assert exc.value.code == ErrorCode.EMPLOYEE_NOT_FOUND


def test_enroll_rejects_wrong_length(container):
    with pytest.raises(ValidationError) as exc:
        container.face_service.enroll("emp-1", [0.0] * 64)

    assert exc.value.code == ErrorCode.DESCRIPTOR_LENGTH_MISMATCH
    assert exc.value.details == {"expected": 128, "actual": 64}


def test_enroll_rejects_non_numeric_descriptor(container):
    with pytest.raises(ValidationError):
        container.face_service.enroll("emp-1", ["a"] * 128)


def test_training_score_lowers_threshold(container):
    container.face_service.enroll("emp-1", _descriptor(), training_score=82)

    result = container.face_service.verify("emp-1", _descriptor(0.25))

    assert result.match.threshold == 72
    assert result.match.accepted
    assert result.training_score == 82


def test_reenroll_without_score_clears_previous_training_score(container, employees):
    container.face_service.enroll("emp-1", _descriptor(), training_score=82)
    container.face_service.enroll("emp-1", _descriptor(0.1))

    assert employees.get_by_id("emp-1").face_training_score is None
    assert container.face_service.verify("emp-1", _descriptor(0.35)).match.threshold == 80.0


def test_threshold_is_read_fresh_each_attempt(container, settings_repo):
    container.face_service.enroll("emp-1", _descriptor())
    live = _descriptor(0.25)

    assert not container.face_service.verify("emp-1", live).match.accepted

    settings_repo.values["face_recognition_threshold"] = "70"

    assert container.face_service.verify("emp-1", live).match.accepted


def test_missing_threshold_setting_uses_default(container, settings_repo):
    del settings_repo.values["face_recognition_threshold"]
    container.face_service.enroll("emp-1", _descriptor())

    result = container.face_service.verify("emp-1", _descriptor())

    assert result.global_threshold == 80.0


@pytest.mark.parametrize("bad", [float("nan"), float("inf"), float("-inf")])
def test_enroll_rejects_non_finite_values(container, employees, bad):
    with pytest.raises(ValidationError) as exc:
        container.face_service.enroll("emp-1", [bad] + [0.0] * 127)

    assert exc.value.code == ErrorCode.INVALID_INPUT
    assert not employees.get_by_id("emp-1").is_enrolled


@pytest.mark.parametrize("bad", [float("nan"), float("inf")])
def test_verify_rejects_non_finite_values(container, bad):
    container.face_service.enroll("emp-1", _descriptor())

    with pytest.raises(ValidationError) as exc:
        container.face_service.verify("emp-1", [bad] + [0.9] * 127)

    assert exc.value.code == ErrorCode.INVALID_INPUT


def test_corrupt_stored_descriptor_never_matches(container, employees):
    employees.employees["emp-1"] = replace(employees.get_by_id("emp-1"), face_descriptor=(float("nan"),) + (0.0,) * 127)

    result = container.face_service.verify("emp-1", _descriptor())

    assert not result.match.accepted
    assert result.match.similarity == 0.0
    assert result.to_dict()["distance"] is None
