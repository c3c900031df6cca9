from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Optional

from ..core.exceptions import ValidationError


def _truncate_ms(value: datetime) -> datetime:
    # MongoDB stores dates with millisecond precision.
    return value.replace(microsecond=(value.microsecond // 1000) * 1000)


def now_utc() -> datetime:
    """Current UTC time.

    Note: Wrapped so tests can patch/mock it easier.
    """
    return _truncate_ms(datetime.now(timezone.utc))


def parse_iso_datetime(value: Any, field_name: str) -> Optional[datetime]:
    """Parse an optional ISO-8601 string into an aware UTC datetime."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be an ISO-8601 string")
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        raise ValidationError(f"{field_name} must be an ISO-8601 string")
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return _truncate_ms(parsed.astimezone(timezone.utc))


def to_iso(value: Optional[datetime]) -> Optional[str]:
    if value is None:
        return None
    if value.tzinfo is None:
        # pymongo hands back naive UTC datetimes unless tz_aware is set.
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat()
