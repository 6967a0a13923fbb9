from __future__ import annotations

import math
from numbers import Real
from typing import Any, Optional, Sequence, Tuple

from ..core.enums import ErrorCode
from ..core.exceptions import ValidationError


def require_non_empty(value: Any, field_name: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def _is_number(value: Any) -> bool:
    # bool is a Real subclass; reject it explicitly
    if not isinstance(value, Real) or isinstance(value, bool):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def require_coordinates(latitude: Any, longitude: Any) -> Tuple[float, float]:
    if latitude is None or longitude is None:
        raise ValidationError(
            "Lokasi GPS tidak tersedia. Pastikan GPS pada perangkat Anda aktif.",
            code=ErrorCode.INVALID_COORDINATES,
        )
    if not _is_number(latitude) or not -90 <= latitude <= 90:
        raise ValidationError(
            "Koordinat latitude tidak valid",
            code=ErrorCode.INVALID_COORDINATES,
            details={"latitude": latitude},
        )
    if not _is_number(longitude) or not -180 <= longitude <= 180:
        raise ValidationError(
            "Koordinat longitude tidak valid",
            code=ErrorCode.INVALID_COORDINATES,
            details={"longitude": longitude},
        )
    return float(latitude), float(longitude)


def optional_score(value: Any, field_name: str) -> Optional[float]:
    if value is None:
        return None
    if not _is_number(value):
        raise ValidationError(f"{field_name} must be a number")
    if not 0 <= value <= 100:
        raise ValidationError(f"{field_name} must be between 0 and 100")
    return float(value)


def require_descriptor(value: Any, *, length: int) -> Tuple[float, ...]:
    if not isinstance(value, Sequence) or isinstance(value, (str, bytes)):
        raise ValidationError("face_descriptor must be an array of numbers")
    if not all(_is_number(v) for v in value):
        raise ValidationError("face_descriptor must be an array of numbers")
    if len(value) != length:
        raise ValidationError(
            f"face_descriptor must be an array of {length} numbers",
            code=ErrorCode.DESCRIPTOR_LENGTH_MISMATCH,
            details={"expected": length, "actual": len(value)},
        )
    return tuple(float(v) for v in value)
