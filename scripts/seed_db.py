from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import load_settings

from src.school_attendance.school_attendance.container import build_container
from src.school_attendance.school_attendance.core.exceptions import AuthenticationError, ConflictError
from src.school_attendance.school_attendance.database.bootstrap import ensure_indexes

DEMO_EMAIL = "demo@school.test"
DEMO_SECRET = "demo1234"


def main() -> None:
    settings = load_settings()
    container = build_container(db_config=dict(settings.DB_CONFIG))
    ensure_indexes(container.conn.database())

    try:
        token = container.identity_service.register(DEMO_EMAIL, DEMO_SECRET)
    except ConflictError:
        try:
            token = container.identity_service.authenticate(DEMO_EMAIL, DEMO_SECRET)
        except AuthenticationError:
            print(f"SKIP: {DEMO_EMAIL} exists with a different secret")
            return
        print(f"SKIP: {DEMO_EMAIL} already seeded (token={token})")
        return

    container.class_service.create(token, {"name": "Nine", "subject": "Mathematics"})
    container.teacher_service.create(token, {"name": "Mrs. Rao", "subject": "Mathematics"})
    for name in ("Jon", "Asha", "Ravi"):
        admission_no = container.student_service.next_admission_no(token)
        student = container.student_service.create(
            token, {"name": name, "admissionNo": admission_no, "class": "Nine", "attendancePercentage": 90}
        )
        container.attendance_service.create(token, {"studentId": student.record_id, "status": "Present"})

    print(f"OK: Seeded {DEMO_EMAIL} / {DEMO_SECRET} (token={token})")


if __name__ == "__main__":
    main()
