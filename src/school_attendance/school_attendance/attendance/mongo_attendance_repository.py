from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Sequence

from bson import ObjectId

from ..common.validators import parse_object_id
from ..core.enums import AttendanceStatus, RecordKind
from ..database.mongo_base import owner_filter
from ..records.mongo_record_repository import MongoOwnedRecordRepository
from ..students.model import StudentRecord
from ..students.mongo_student_repository import student_from_doc
from .model import AttendanceRecord
from .repository import AttendanceRepository


class MongoAttendanceRepository(MongoOwnedRecordRepository[AttendanceRecord], AttendanceRepository):
    kind = RecordKind.ATTENDANCE

    def _from_doc(self, doc: Mapping[str, Any]) -> AttendanceRecord:
        student: Optional[StudentRecord] = None
        joined = doc.get("student")
        if isinstance(joined, list) and joined:
            student = student_from_doc(joined[0])
        elif isinstance(joined, StudentRecord):
            student = joined

        return AttendanceRecord(
            record_id=str(doc["_id"]),
            owner_id=str(doc["userId"]),
            student_id=str(doc["studentId"]),
            date=doc["date"],
            status=AttendanceStatus(doc["status"]),
            student=student,
        )

    def _to_doc(self, fields: Mapping[str, Any]) -> Dict[str, Any]:
        doc = dict(fields)
        doc["studentId"] = ObjectId(doc["studentId"])
        doc["status"] = AttendanceStatus(doc["status"]).value
        # Resolved by the service at create time; not stored.
        doc.pop("student", None)
        return doc

    def create(self, *, owner_id: str, fields: Mapping[str, Any]) -> AttendanceRecord:
        doc = self._to_doc(fields)
        doc["userId"] = ObjectId(owner_id)
        self._insert(doc)
        return self._from_doc({**doc, "student": fields.get("student")})

    def _joined(self, match: Dict[str, Any]) -> Sequence[AttendanceRecord]:
        pipeline = [
            {"$match": match},
            {"$sort": {"_id": 1}},
            {
                "$lookup": {
                    "from": RecordKind.STUDENT.value,
                    "localField": "studentId",
                    "foreignField": "_id",
                    "as": "student",
                }
            },
        ]
        return [self._from_doc(doc) for doc in self._collection().aggregate(pipeline)]

    def list_for_owner(self, owner_id: str) -> Sequence[AttendanceRecord]:
        return self._joined(owner_filter(ObjectId(owner_id)))

    def get_for_owner(self, owner_id: str, record_id: str) -> Optional[AttendanceRecord]:
        oid = parse_object_id(record_id)
        if oid is None:
            return None
        rows = self._joined(owner_filter(ObjectId(owner_id), _id=oid))
        return rows[0] if rows else None
