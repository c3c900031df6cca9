from __future__ import annotations

import re
from typing import Any, Dict, Mapping

from ..common.validators import require_non_empty, require_percentage
from ..core.constants import ADMISSION_NO_DIGITS, ADMISSION_NO_PREFIX
from ..core.enums import RecordKind
from ..core.exceptions import ValidationError
from ..records.service import OwnedRecordService
from .model import StudentRecord
from .repository import StudentRepository

_ADMISSION_NO_RE = re.compile(rf"^{ADMISSION_NO_PREFIX}(\d+)$")


def format_admission_no(number: int) -> str:
    return f"{ADMISSION_NO_PREFIX}{number:0{ADMISSION_NO_DIGITS}d}"


class StudentService(OwnedRecordService[StudentRecord]):
    kind = RecordKind.STUDENT
    label = "Student"

    def __init__(self, students: StudentRepository):
        super().__init__(students)
        self._students = students

    def _validate(self, owner_id: str, payload: Mapping[str, Any]) -> Dict[str, Any]:
        name = require_non_empty(payload.get("name"), "Student name")
        admission_no = require_non_empty(payload.get("admissionNo"), "Admission number")
        class_label = require_non_empty(payload.get("class"), "Class")
        percentage = require_percentage(payload.get("attendancePercentage"), "Attendance percentage")

        if self._students.admission_no_exists(admission_no):
            raise ValidationError("Admission number already exists")

        return {
            "name": name,
            "admissionNo": admission_no,
            "class": class_label,
            "attendancePercentage": percentage,
        }

    def next_admission_no(self, owner_id: str) -> str:
        """Suggest the next AMS### number after the caller's highest one.

        Numbers taken by other identities are skipped.
        """

        highest = 0
        for student in self._students.list_for_owner(owner_id):
            m = _ADMISSION_NO_RE.match(student.admission_no)
            if m:
                highest = max(highest, int(m.group(1)))

        candidate = highest + 1
        while self._students.admission_no_exists(format_admission_no(candidate)):
            candidate += 1
        return format_admission_no(candidate)
