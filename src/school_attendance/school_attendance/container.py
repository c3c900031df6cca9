from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.mongo_attendance_repository import MongoAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .classes.mongo_class_repository import MongoClassRepository
from .classes.repository import ClassRepository
from .classes.service import ClassService
from .dashboard.service import DashboardService
from .database.connection import DBConfig, DatabaseConnection
from .identities.mongo_identity_repository import MongoIdentityRepository
from .identities.repository import IdentityRepository
from .identities.service import IdentityService
from .students.mongo_student_repository import MongoStudentRepository
from .students.repository import StudentRepository
from .students.service import StudentService
from .teachers.mongo_teacher_repository import MongoTeacherRepository
from .teachers.repository import TeacherRepository
from .teachers.service import TeacherService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    identities_repo: IdentityRepository
    classes_repo: ClassRepository
    teachers_repo: TeacherRepository
    students_repo: StudentRepository
    attendance_repo: AttendanceRepository

    identity_service: IdentityService
    class_service: ClassService
    teacher_service: TeacherService
    student_service: StudentService
    attendance_service: AttendanceService
    dashboard_service: DashboardService


def assemble(
    *,
    identities_repo: IdentityRepository,
    classes_repo: ClassRepository,
    teachers_repo: TeacherRepository,
    students_repo: StudentRepository,
    attendance_repo: AttendanceRepository,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    """Wire services on top of any repository implementations."""

    class_service = ClassService(classes_repo)
    teacher_service = TeacherService(teachers_repo)
    student_service = StudentService(students_repo)
    attendance_service = AttendanceService(attendance_repo, students_repo)
    dashboard_service = DashboardService(class_service, teacher_service, student_service, attendance_service)

    return Container(
        conn=conn,
        identities_repo=identities_repo,
        classes_repo=classes_repo,
        teachers_repo=teachers_repo,
        students_repo=students_repo,
        attendance_repo=attendance_repo,
        identity_service=IdentityService(identities_repo),
        class_service=class_service,
        teacher_service=teacher_service,
        student_service=student_service,
        attendance_service=attendance_service,
        dashboard_service=dashboard_service,
    )


def build_container(*, db_config: dict) -> Container:
    config = DBConfig(
        uri=str(db_config["uri"]),
        database=str(db_config["database"]),
        server_selection_timeout_ms=int(db_config.get("server_selection_timeout_ms", 5000)),
    )
    conn = DatabaseConnection.get_instance(config)

    return assemble(
        conn=conn,
        identities_repo=MongoIdentityRepository(conn),
        classes_repo=MongoClassRepository(conn),
        teachers_repo=MongoTeacherRepository(conn),
        students_repo=MongoStudentRepository(conn),
        attendance_repo=MongoAttendanceRepository(conn),
    )
