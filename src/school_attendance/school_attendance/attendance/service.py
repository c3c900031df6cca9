from __future__ import annotations

from typing import Any, Dict, Mapping

from ..common.datetime_utils import now_utc, parse_iso_datetime
from ..common.validators import parse_object_id
from ..core.enums import AttendanceStatus, RecordKind
from ..core.exceptions import ValidationError
from ..records.service import OwnedRecordService
from ..students.repository import StudentRepository
from .model import AttendanceRecord
from .repository import AttendanceRepository


class AttendanceService(OwnedRecordService[AttendanceRecord]):
    kind = RecordKind.ATTENDANCE
    label = "Attendance record"

    def __init__(self, attendance: AttendanceRepository, students: StudentRepository, *, clock=now_utc):
        super().__init__(attendance)
        self._students = students
        self._clock = clock

    def _validate(self, owner_id: str, payload: Mapping[str, Any]) -> Dict[str, Any]:
        student_id = payload.get("studentId")
        if parse_object_id(student_id) is None:
            raise ValidationError("studentId is not a valid id")

        # Only the caller's own students can be marked.
        student = self._students.get_for_owner(owner_id, student_id)
        if not student:
            raise ValidationError("studentId does not reference an existing student")

        try:
            status = AttendanceStatus(payload.get("status"))
        except (TypeError, ValueError):
            allowed = ", ".join(s.value for s in AttendanceStatus)
            raise ValidationError(f"status must be one of: {allowed}")

        date = parse_iso_datetime(payload.get("date"), "date") or self._clock()

        return {
            "studentId": student.record_id,
            "status": status,
            "date": date,
            "student": student,
        }
