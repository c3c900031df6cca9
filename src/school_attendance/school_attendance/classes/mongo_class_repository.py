from __future__ import annotations

from typing import Any, Mapping

from ..core.enums import RecordKind
from ..records.mongo_record_repository import MongoOwnedRecordRepository
from .model import ClassRecord


class MongoClassRepository(MongoOwnedRecordRepository[ClassRecord]):
    kind = RecordKind.CLASS

    def _from_doc(self, doc: Mapping[str, Any]) -> ClassRecord:
        return ClassRecord(
            record_id=str(doc["_id"]),
            owner_id=str(doc["userId"]),
            name=doc["name"],
            subject=doc["subject"],
        )
