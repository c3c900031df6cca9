from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from bson import ObjectId

from src.school_attendance.school_attendance.common.datetime_utils import parse_iso_datetime, to_iso
from src.school_attendance.school_attendance.common.validators import (
    parse_object_id,
    require_non_empty,
    require_percentage,
)
from src.school_attendance.school_attendance.core.exceptions import ValidationError


def test_require_non_empty_strips():
    assert require_non_empty("  Jon ", "Name") == "Jon"
    with pytest.raises(ValidationError):
        require_non_empty(42, "Name")


def test_parse_object_id():
    oid = ObjectId()
    assert parse_object_id(str(oid)) == oid
    assert parse_object_id(oid) is oid
    assert parse_object_id("zzz") is None
    assert parse_object_id(None) is None


def test_percentage_rejects_nan():
    with pytest.raises(ValidationError):
        require_percentage("nan", "Attendance percentage")


def test_parse_iso_datetime_converts_to_utc():
    parsed = parse_iso_datetime("2024-03-01T10:30:00+02:00", "date")
    assert parsed == datetime(2024, 3, 1, 8, 30, tzinfo=timezone.utc)
    assert parse_iso_datetime(None, "date") is None
    with pytest.raises(ValidationError):
        parse_iso_datetime("yesterday", "date")


def test_to_iso_treats_naive_as_utc():
    assert to_iso(datetime(2024, 1, 1, 12, 0)) == "2024-01-01T12:00:00+00:00"
    aware = datetime(2024, 1, 1, 12, 0, tzinfo=timezone(timedelta(hours=5)))
    assert to_iso(aware) == "2024-01-01T12:00:00+05:00"
