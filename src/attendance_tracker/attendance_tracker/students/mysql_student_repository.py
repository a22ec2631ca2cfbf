from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import StudentRow
from .repository import StudentRepository


class MySQLStudentRepository(StudentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, student_id: int) -> Optional[StudentRow]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, name, username FROM students WHERE id=%s", (int(student_id),))
            r = fetchone(cur)
            if not r:
                return None
            return StudentRow(student_id=int(r["id"]), name=r["name"], username=r["username"])
