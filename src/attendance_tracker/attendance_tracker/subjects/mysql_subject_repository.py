from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Subject
from .repository import SubjectRepository


def _row_to_subject(r: dict) -> Subject:
    return Subject(
        name=r["name"],
        classes_per_week=int(r.get("classes_per_week") or 0),
        subject_id=int(r["id"]),
    )


class MySQLSubjectRepository(SubjectRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_student(self, student_id: int) -> Sequence[Subject]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT id, name, classes_per_week FROM subjects WHERE student_id=%s ORDER BY id ASC",
                (int(student_id),),
            )
            return [_row_to_subject(r) for r in fetchall(cur)]

    def get_by_id(self, subject_id: int) -> Optional[Subject]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, name, classes_per_week FROM subjects WHERE id=%s", (int(subject_id),))
            r = fetchone(cur)
            return _row_to_subject(r) if r else None

    def add(self, *, student_id: int, name: str, classes_per_week: int) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO subjects(student_id, name, classes_per_week) VALUES(%s,%s,%s)",
                (int(student_id), name, int(classes_per_week)),
            )
            return int(cur.lastrowid)

    def update(self, *, subject_id: int, name: str, classes_per_week: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE subjects SET name=%s, classes_per_week=%s WHERE id=%s",
                (name, int(classes_per_week), int(subject_id)),
            )
            return cur.rowcount > 0

    def delete(self, *, subject_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM subjects WHERE id=%s", (int(subject_id),))
            return cur.rowcount > 0
