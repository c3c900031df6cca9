from __future__ import annotations

from datetime import datetime, timezone

import pytest

from src.school_attendance.school_attendance.core.enums import AttendanceStatus
from src.school_attendance.school_attendance.core.exceptions import ValidationError

from tests.fakes import new_id


@pytest.fixture
def owner():
    return new_id()


@pytest.fixture
def student(container, owner):
    return container.student_service.create(owner, {"name": "Jon", "admissionNo": "AMS001", "class": "Nine"})


def test_create_defaults_date_and_resolves_student(container, owner, student):
    rec = container.attendance_service.create(owner, {"studentId": student.record_id, "status": "Present"})

    assert rec.status == AttendanceStatus.PRESENT
    assert rec.date.tzinfo is not None
    assert rec.student == student
    assert rec.to_dict()["student"]["admissionNo"] == "AMS001"


def test_explicit_date_is_kept(container, owner, student):
    rec = container.attendance_service.create(
        owner, {"studentId": student.record_id, "status": "Absent", "date": "2024-03-01T08:30:00Z"}
    )

    assert rec.date == datetime(2024, 3, 1, 8, 30, tzinfo=timezone.utc)
    assert rec.to_dict()["date"] == "2024-03-01T08:30:00+00:00"


@pytest.mark.parametrize("status", ["present", "Late", "", None])
def test_status_outside_enum_is_rejected(container, owner, student, status):
    with pytest.raises(ValidationError):
        container.attendance_service.create(owner, {"studentId": student.record_id, "status": status})


def test_unknown_or_foreign_student_is_rejected(container, owner, student):
    with pytest.raises(ValidationError):
        container.attendance_service.create(owner, {"studentId": new_id(), "status": "Present"})
    with pytest.raises(ValidationError):
        container.attendance_service.create(new_id(), {"studentId": student.record_id, "status": "Present"})
    with pytest.raises(ValidationError):
        container.attendance_service.create(owner, {"studentId": "123", "status": "Present"})


def test_deleting_student_leaves_orphaned_attendance(container, owner, student):
    container.attendance_service.create(owner, {"studentId": student.record_id, "status": "Present"})
    container.student_service.delete(owner, student.record_id)

    rows = container.attendance_service.list(owner)
    assert len(rows) == 1
    assert rows[0].student is None
    assert rows[0].to_dict()["student"] is None
