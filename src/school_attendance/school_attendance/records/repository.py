from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence, TypeVar

T = TypeVar("T")


class OwnedRecordRepository(Protocol[T]):
    """Storage for one record kind, always scoped to the owning identity.

    Every method takes owner_id and must never read, return or delete a
    record stamped with a different owner.
    """

    def list_for_owner(self, owner_id: str) -> Sequence[T]:
        raise NotImplementedError

    def get_for_owner(self, owner_id: str, record_id: str) -> Optional[T]:
        raise NotImplementedError

    def count_for_owner(self, owner_id: str) -> int:
        raise NotImplementedError

    def create(self, *, owner_id: str, fields: Mapping[str, Any]) -> T:
        raise NotImplementedError

    def delete_for_owner(self, owner_id: str, record_id: str) -> bool:
        """Delete in a single storage operation; False if nothing matched."""

        raise NotImplementedError
