from __future__ import annotations

from datetime import date
from typing import Sequence

from ..common.datetime_utils import iter_days
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, normalize_mysql_date
from .model import Holiday
from .repository import HolidayRepository

_UPSERT = """
    INSERT INTO holidays(student_id, holiday_date, description)
    VALUES(%s,%s,%s)
    ON DUPLICATE KEY UPDATE description=VALUES(description)
"""


class MySQLHolidayRepository(HolidayRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_student(self, student_id: int) -> Sequence[Holiday]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT holiday_date, description FROM holidays WHERE student_id=%s ORDER BY holiday_date ASC",
                (int(student_id),),
            )
            return [
                Holiday(date=normalize_mysql_date(r["holiday_date"]), description=r.get("description") or "")
                for r in fetchall(cur)
            ]

    def upsert(self, *, student_id: int, holiday_date: date, description: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_UPSERT, (int(student_id), holiday_date, description))

    def upsert_range(self, *, student_id: int, start: date, end: date, description: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.executemany(_UPSERT, [(int(student_id), d, description) for d in iter_days(start, end)])

    def delete(self, *, student_id: int, holiday_date: date) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "DELETE FROM holidays WHERE student_id=%s AND holiday_date=%s",
                (int(student_id), holiday_date),
            )
            return cur.rowcount > 0

    def delete_by_description(self, *, student_id: int, description: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "DELETE FROM holidays WHERE student_id=%s AND description=%s",
                (int(student_id), description),
            )
            return int(cur.rowcount or 0)

    def update(self, *, student_id: int, old_date: date, new_date: date, description: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE holidays SET holiday_date=%s, description=%s WHERE student_id=%s AND holiday_date=%s",
                (new_date, description, int(student_id), old_date),
            )
            return cur.rowcount > 0
