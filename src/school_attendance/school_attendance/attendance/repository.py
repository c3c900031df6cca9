from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def list_for_owner(self, owner_id: str) -> Sequence[AttendanceRecord]:
        """Attendance rows of the owner, each joined with its student."""

        raise NotImplementedError

    def get_for_owner(self, owner_id: str, record_id: str) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def count_for_owner(self, owner_id: str) -> int:
        raise NotImplementedError

    def create(self, *, owner_id: str, fields) -> AttendanceRecord:
        raise NotImplementedError

    def delete_for_owner(self, owner_id: str, record_id: str) -> bool:
        raise NotImplementedError
