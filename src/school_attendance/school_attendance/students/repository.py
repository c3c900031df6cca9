from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import StudentRecord


class StudentRepository(Protocol):
    def list_for_owner(self, owner_id: str) -> Sequence[StudentRecord]:
        raise NotImplementedError

    def get_for_owner(self, owner_id: str, record_id: str) -> Optional[StudentRecord]:
        raise NotImplementedError

    def count_for_owner(self, owner_id: str) -> int:
        raise NotImplementedError

    def create(self, *, owner_id: str, fields) -> StudentRecord:
        """Raises ValidationError if the admission number is already taken."""

        raise NotImplementedError

    def delete_for_owner(self, owner_id: str, record_id: str) -> bool:
        raise NotImplementedError

    def admission_no_exists(self, admission_no: str) -> bool:
        """Global check, across every identity."""

        raise NotImplementedError
