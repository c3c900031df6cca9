from __future__ import annotations

from typing import Any, Dict, Mapping

from ..common.validators import require_non_empty
from ..core.enums import RecordKind
from ..records.service import OwnedRecordService
from .model import TeacherRecord


class TeacherService(OwnedRecordService[TeacherRecord]):
    kind = RecordKind.TEACHER
    label = "Teacher"

    def _validate(self, owner_id: str, payload: Mapping[str, Any]) -> Dict[str, Any]:
        return {
            "name": require_non_empty(payload.get("name"), "Teacher name"),
            "subject": require_non_empty(payload.get("subject"), "Subject"),
        }
