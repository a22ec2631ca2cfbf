from __future__ import annotations

from dataclasses import dataclass

from .blackouts.mysql_holiday_repository import MySQLHolidayRepository
from .core.constants import ATTENDANCE_THRESHOLD
from .database.connection import DBConfig, DatabaseConnection
from .ledger.mysql_attendance_repository import MySQLAttendanceRepository
from .schedules.mysql_schedule_repository import MySQLScheduleRepository
from .semester.mysql_semester_repository import MySQLSemesterRepository
from .students.mysql_student_repository import MySQLStudentRepository
from .students.service import TrackerService
from .subjects.mysql_subject_repository import MySQLSubjectRepository


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    students_repo: MySQLStudentRepository
    subjects_repo: MySQLSubjectRepository
    attendance_repo: MySQLAttendanceRepository
    holidays_repo: MySQLHolidayRepository
    schedules_repo: MySQLScheduleRepository
    semesters_repo: MySQLSemesterRepository

    tracker_service: TrackerService


def build_container(*, db_config: dict, threshold: float = ATTENDANCE_THRESHOLD) -> Container:
    conn = DatabaseConnection(DBConfig.from_dict(db_config))

    students_repo = MySQLStudentRepository(conn)
    subjects_repo = MySQLSubjectRepository(conn)
    attendance_repo = MySQLAttendanceRepository(conn)
    holidays_repo = MySQLHolidayRepository(conn)
    schedules_repo = MySQLScheduleRepository(conn)
    semesters_repo = MySQLSemesterRepository(conn)

    tracker_service = TrackerService(
        students_repo,
        subjects_repo,
        attendance_repo,
        holidays_repo,
        schedules_repo,
        semesters_repo,
        threshold=threshold,
    )

    return Container(
        conn=conn,
        students_repo=students_repo,
        subjects_repo=subjects_repo,
        attendance_repo=attendance_repo,
        holidays_repo=holidays_repo,
        schedules_repo=schedules_repo,
        semesters_repo=semesters_repo,
        tracker_service=tracker_service,
    )
