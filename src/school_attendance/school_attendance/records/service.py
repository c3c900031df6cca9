from __future__ import annotations

from abc import ABC, abstractmethod
import logging
from typing import Any, Dict, Generic, Mapping, Sequence, TypeVar

from ..core.enums import RecordKind
from ..core.exceptions import NotFoundOrUnauthorizedError
from .repository import OwnedRecordRepository

logger = logging.getLogger(__name__)

T = TypeVar("T")


class OwnedRecordService(Generic[T], ABC):
    """List/create/delete for one record kind, scoped to the caller's identity.

    Subclasses implement `_validate` to turn a raw payload into stored fields.
    The owner is always stamped from the token, never from the payload.
    """

    kind: RecordKind
    label: str = "Record"

    def __init__(self, records: OwnedRecordRepository[T]):
        self._records = records

    @abstractmethod
    def _validate(self, owner_id: str, payload: Mapping[str, Any]) -> Dict[str, Any]:
        raise NotImplementedError

    def list(self, owner_id: str) -> Sequence[T]:
        return self._records.list_for_owner(owner_id)

    def count(self, owner_id: str) -> int:
        return self._records.count_for_owner(owner_id)

    def create(self, owner_id: str, payload: Mapping[str, Any]) -> T:
        fields = self._validate(owner_id, payload)
        record = self._records.create(owner_id=owner_id, fields=fields)
        logger.info("created %s %s for %s", self.kind.value, record.record_id, owner_id)
        return record

    def delete(self, owner_id: str, record_id: str) -> None:
        if not self._records.delete_for_owner(owner_id, record_id):
            raise NotFoundOrUnauthorizedError(f"{self.label} not found or unauthorized")
        logger.info("deleted %s %s for %s", self.kind.value, record_id, owner_id)
