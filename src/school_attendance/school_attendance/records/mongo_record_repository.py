from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, Mapping, Optional, Sequence, TypeVar

from bson import ObjectId
from pymongo import ASCENDING

from ..common.validators import parse_object_id
from ..core.enums import RecordKind
from ..database.connection import DatabaseConnection
from ..database.mongo_base import owner_filter

T = TypeVar("T")


class MongoOwnedRecordRepository(Generic[T], ABC):
    """Base MongoDB repository for a record kind stamped with `userId`.

    Subclasses set `kind` and implement `_from_doc`; `_to_doc` converts the
    service-level fields into a document (ids as ObjectId).
    """

    kind: RecordKind

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _collection(self):
        return self._conn_factory.database()[self.kind.value]

    @abstractmethod
    def _from_doc(self, doc: Mapping[str, Any]) -> T:
        raise NotImplementedError

    def _to_doc(self, fields: Mapping[str, Any]) -> Dict[str, Any]:
        return dict(fields)

    def _insert(self, doc: Dict[str, Any]) -> None:
        self._collection().insert_one(doc)

    def list_for_owner(self, owner_id: str) -> Sequence[T]:
        cursor = self._collection().find(owner_filter(ObjectId(owner_id))).sort("_id", ASCENDING)
        return [self._from_doc(doc) for doc in cursor]

    def get_for_owner(self, owner_id: str, record_id: str) -> Optional[T]:
        oid = parse_object_id(record_id)
        if oid is None:
            return None
        doc = self._collection().find_one(owner_filter(ObjectId(owner_id), _id=oid))
        return self._from_doc(doc) if doc else None

    def count_for_owner(self, owner_id: str) -> int:
        return int(self._collection().count_documents(owner_filter(ObjectId(owner_id))))

    def create(self, *, owner_id: str, fields: Mapping[str, Any]) -> T:
        doc = self._to_doc(fields)
        doc["userId"] = ObjectId(owner_id)
        # insert_one sets doc["_id"]
        self._insert(doc)
        return self._from_doc(doc)

    def delete_for_owner(self, owner_id: str, record_id: str) -> bool:
        oid = parse_object_id(record_id)
        if oid is None:
            return False
        result = self._collection().delete_one(owner_filter(ObjectId(owner_id), _id=oid))
        return result.deleted_count > 0
