from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone, normalize_mysql_date
from .model import SemesterWindow
from .repository import SemesterRepository


class MySQLSemesterRepository(SemesterRepository):
    """Semester dates live as nullable columns on the ``students`` row."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_student(self, student_id: int) -> Optional[SemesterWindow]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT semester_start_date, midsem_exam_start_date, midsem_exam_end_date, last_teaching_day
                FROM students
                WHERE id=%s
                """,
                (int(student_id),),
            )
            r = fetchone(cur)
            if not r:
                return None

            start = normalize_mysql_date(r.get("semester_start_date"))
            last_day = normalize_mysql_date(r.get("last_teaching_day"))
            if start is None or last_day is None:
                return None

            exam_start = normalize_mysql_date(r.get("midsem_exam_start_date"))
            exam_end = normalize_mysql_date(r.get("midsem_exam_end_date"))
            if exam_start is None or exam_end is None:
                exam_start = exam_end = None

            return SemesterWindow(start=start, last_teaching_day=last_day, exam_start=exam_start, exam_end=exam_end)

    def save(self, *, student_id: int, window: Optional[SemesterWindow]) -> None:
        values = (None, None, None, None)
        if window is not None:
            values = (window.start, window.exam_start, window.exam_end, window.last_teaching_day)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE students
                SET semester_start_date=%s, midsem_exam_start_date=%s, midsem_exam_end_date=%s, last_teaching_day=%s
                WHERE id=%s
                """,
                (*values, int(student_id)),
            )
