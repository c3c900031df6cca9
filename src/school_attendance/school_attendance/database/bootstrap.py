from __future__ import annotations

import logging
from typing import List

from pymongo import ASCENDING
from pymongo.database import Database

from ..core.constants import IDENTITIES_COLLECTION
from ..core.enums import RecordKind

logger = logging.getLogger(__name__)


def ensure_indexes(db: Database) -> None:
    """Create the indexes the services rely on (idempotent)."""

    db[IDENTITIES_COLLECTION].create_index([("email", ASCENDING)], unique=True, name="uq_identity_email")
    for kind in RecordKind:
        db[kind.value].create_index([("userId", ASCENDING)], name="ix_owner")
    db[RecordKind.STUDENT.value].create_index(
        [("admissionNo", ASCENDING)], unique=True, name="uq_student_admission_no"
    )
    db[RecordKind.ATTENDANCE.value].create_index([("studentId", ASCENDING)], name="ix_attendance_student")
    logger.info("indexes ready on database %s", db.name)


def list_collections(db: Database) -> List[str]:
    return sorted(db.list_collection_names())


def ping(db: Database) -> bool:
    db.command("ping")
    return True
