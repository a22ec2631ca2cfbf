from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import Holiday


class HolidayRepository(Protocol):
    def list_for_student(self, student_id: int) -> Sequence[Holiday]:
        raise NotImplementedError

    def upsert(self, *, student_id: int, holiday_date: date, description: str) -> None:
        raise NotImplementedError

    def upsert_range(self, *, student_id: int, start: date, end: date, description: str) -> None:
        raise NotImplementedError

    def delete(self, *, student_id: int, holiday_date: date) -> bool:
        raise NotImplementedError

    def delete_by_description(self, *, student_id: int, description: str) -> int:
        raise NotImplementedError

    def update(self, *, student_id: int, old_date: date, new_date: date, description: str) -> bool:
        raise NotImplementedError
