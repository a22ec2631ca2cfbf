from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def list_for_subject(self, subject_id: int) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def upsert(self, *, subject_id: int, record_date: date, present: bool) -> None:
        """Insert a record or overwrite presence for an existing (subject, date)."""

        raise NotImplementedError

    def delete(self, *, subject_id: int, record_date: date) -> bool:
        raise NotImplementedError

    def delete_for_student_in_range(self, *, student_id: int, start: date, end: date) -> int:
        """Delete every subject's records for a student in [start, end]. Returns rows deleted."""

        raise NotImplementedError

    def replace_for_subject(self, *, subject_id: int, records: Sequence[AttendanceRecord]) -> None:
        """Atomically swap all records of a subject (initial seeding)."""

        raise NotImplementedError
