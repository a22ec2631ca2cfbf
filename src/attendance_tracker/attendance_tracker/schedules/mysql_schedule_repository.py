from __future__ import annotations

from typing import Sequence

from ..core.enums import Weekday
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .repository import ScheduleRepository


class MySQLScheduleRepository(ScheduleRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_days_for_subject(self, subject_id: int) -> Sequence[Weekday]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT day_of_week FROM weekly_schedule WHERE subject_id=%s", (int(subject_id),))
            days = {Weekday(str(r["day_of_week"]).upper()) for r in fetchall(cur)}
            return [d for d in Weekday if d in days]

    def replace_for_subject(self, *, subject_id: int, days: Sequence[Weekday]) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM weekly_schedule WHERE subject_id=%s", (int(subject_id),))
            if days:
                cur.executemany(
                    "INSERT INTO weekly_schedule(subject_id, day_of_week) VALUES(%s,%s)",
                    [(int(subject_id), Weekday(d).value) for d in days],
                )
