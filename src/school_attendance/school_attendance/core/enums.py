from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Attendance mark stored on each attendance document."""

    PRESENT = "Present"
    ABSENT = "Absent"


class RecordKind(str, Enum):
    """Record kinds exposed through the ownership-filtered API.

    The value doubles as the MongoDB collection name and the URL segment.
    """

    CLASS = "classes"
    TEACHER = "teachers"
    STUDENT = "students"
    ATTENDANCE = "attendance"
