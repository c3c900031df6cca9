from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import to_iso
from ..core.enums import AttendanceStatus
from ..students.model import StudentRecord


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance mark for a student.

    student is the resolved StudentRecord; None when the student has since
    been deleted (attendance is not cascaded).
    """

    record_id: str
    owner_id: str
    student_id: str
    date: datetime
    status: AttendanceStatus
    student: Optional[StudentRecord] = None

    def to_dict(self) -> dict:
        return {
            "_id": self.record_id,
            "studentId": self.student_id,
            "student": self.student.to_dict() if self.student else None,
            "date": to_iso(self.date),
            "status": self.status.value,
            "userId": self.owner_id,
        }
