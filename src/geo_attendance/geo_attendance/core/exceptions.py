from __future__ import annotations

from typing import Any, Mapping, Optional

from .enums import ErrorCode


class DomainError(Exception):
    """Base exception for business rule violations.

    Carries a machine ``code`` and a ``details`` mapping with whatever context
    the caller needs to explain the rejection (distance, boundary time, ...).
    """

    status_code = 400
    default_code = ErrorCode.INVALID_INPUT

    def __init__(
        self,
        message: str,
        *,
        code: Optional[ErrorCode] = None,
        details: Optional[Mapping[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.details = dict(details or {})

    def to_dict(self) -> dict:
        out = {"success": False, "error": self.code.value, "message": self.message}
        if self.details:
            out["details"] = self.details
        return out


class ValidationError(DomainError):
    """Raised when input data is malformed or missing."""


class NotFoundError(DomainError):
    """Raised when the employee, office, schedule or enrollment sought is missing."""

    status_code = 404
    default_code = ErrorCode.EMPLOYEE_NOT_FOUND


class ConflictError(DomainError):
    """Raised when the request conflicts with current state or policy."""

    status_code = 409
    default_code = ErrorCode.ALREADY_CHECKED_IN


class SystemUnavailableError(DomainError):
    """Raised when persistence or settings cannot be read."""

    status_code = 500
    default_code = ErrorCode.INTERNAL
