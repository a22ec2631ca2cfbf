from __future__ import annotations

from datetime import date
from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, normalize_mysql_date
from .model import AttendanceRecord
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_subject(self, subject_id: int) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT record_date, is_present
                FROM attendance_records
                WHERE subject_id=%s
                ORDER BY record_date ASC
                """,
                (int(subject_id),),
            )
            return [
                AttendanceRecord(date=normalize_mysql_date(r["record_date"]), present=bool(r["is_present"]))
                for r in fetchall(cur)
            ]

    def upsert(self, *, subject_id: int, record_date: date, present: bool) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_records(subject_id, record_date, is_present)
                VALUES(%s,%s,%s)
                ON DUPLICATE KEY UPDATE is_present=VALUES(is_present)
                """,
                (int(subject_id), record_date, bool(present)),
            )

    def delete(self, *, subject_id: int, record_date: date) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "DELETE FROM attendance_records WHERE subject_id=%s AND record_date=%s",
                (int(subject_id), record_date),
            )
            return cur.rowcount > 0

    def delete_for_student_in_range(self, *, student_id: int, start: date, end: date) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                DELETE ar FROM attendance_records ar
                JOIN subjects s ON ar.subject_id = s.id
                WHERE s.student_id=%s AND ar.record_date BETWEEN %s AND %s
                """,
                (int(student_id), start, end),
            )
            return int(cur.rowcount or 0)

    def replace_for_subject(self, *, subject_id: int, records: Sequence[AttendanceRecord]) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance_records WHERE subject_id=%s", (int(subject_id),))
            if records:
                cur.executemany(
                    "INSERT INTO attendance_records(subject_id, record_date, is_present) VALUES(%s,%s,%s)",
                    [(int(subject_id), r.date, bool(r.present)) for r in records],
                )
