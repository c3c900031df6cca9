from __future__ import annotations

from typing import Any, Optional

from bson import ObjectId

from ..core.constants import MAX_ATTENDANCE_PERCENTAGE, MIN_ATTENDANCE_PERCENTAGE
from ..core.exceptions import ValidationError


def require_non_empty(value: Any, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def parse_object_id(value: Any) -> Optional[ObjectId]:
    """ObjectId from a 24-hex string, or None if malformed."""
    if isinstance(value, ObjectId):
        return value
    if isinstance(value, str) and ObjectId.is_valid(value):
        return ObjectId(value)
    return None


def require_percentage(value: Any, field_name: str) -> float:
    """Parse an attendance percentage.

    Missing or blank values default to 0. Anything non-numeric or outside
    the [0, 100] range is rejected rather than clamped.
    """

    if value is None or (isinstance(value, str) and not value.strip()):
        return MIN_ATTENDANCE_PERCENTAGE
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a number")
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        raise ValidationError(f"{field_name} must be a number")
    if number != number or not MIN_ATTENDANCE_PERCENTAGE <= number <= MAX_ATTENDANCE_PERCENTAGE:
        raise ValidationError(
            f"{field_name} must be between {MIN_ATTENDANCE_PERCENTAGE:g} and {MAX_ATTENDANCE_PERCENTAGE:g}"
        )
    return number
