from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ClassRecord:
    """Domain entity: a class taught by the owning identity's school."""

    record_id: str
    owner_id: str
    name: str
    subject: str

    def to_dict(self) -> dict:
        return {"_id": self.record_id, "name": self.name, "subject": self.subject, "userId": self.owner_id}
