from __future__ import annotations

from typing import Any, Dict, Mapping

from ..core.enums import RecordKind
from ..core.exceptions import ValidationError
from ..database.mongo_base import unique_violation_as
from ..records.mongo_record_repository import MongoOwnedRecordRepository
from .model import StudentRecord
from .repository import StudentRepository


def student_from_doc(doc: Mapping[str, Any]) -> StudentRecord:
    return StudentRecord(
        record_id=str(doc["_id"]),
        owner_id=str(doc["userId"]),
        name=doc["name"],
        admission_no=doc["admissionNo"],
        class_label=doc["class"],
        attendance_percentage=float(doc.get("attendancePercentage", 0) or 0),
    )


class MongoStudentRepository(MongoOwnedRecordRepository[StudentRecord], StudentRepository):
    kind = RecordKind.STUDENT

    def _from_doc(self, doc: Mapping[str, Any]) -> StudentRecord:
        return student_from_doc(doc)

    def _insert(self, doc: Dict[str, Any]) -> None:
        with unique_violation_as(ValidationError, "Admission number already exists"):
            super()._insert(doc)

    def admission_no_exists(self, admission_no: str) -> bool:
        return self._collection().count_documents({"admissionNo": admission_no}, limit=1) > 0
