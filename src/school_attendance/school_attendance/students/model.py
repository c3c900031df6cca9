from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StudentRecord:
    """Domain entity: a student.

    admission_no is the human-readable number printed on school documents;
    it is unique across all identities, unlike record_id which is internal.
    """

    record_id: str
    owner_id: str
    name: str
    admission_no: str
    class_label: str
    attendance_percentage: float = 0.0

    def to_dict(self) -> dict:
        return {
            "_id": self.record_id,
            "name": self.name,
            "admissionNo": self.admission_no,
            "class": self.class_label,
            "attendancePercentage": self.attendance_percentage,
            "userId": self.owner_id,
        }
