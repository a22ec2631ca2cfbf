from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Subject


class SubjectRepository(Protocol):
    def list_for_student(self, student_id: int) -> Sequence[Subject]:
        """Subjects with empty ledgers; records are loaded separately."""

        raise NotImplementedError

    def get_by_id(self, subject_id: int) -> Optional[Subject]:
        raise NotImplementedError

    def add(self, *, student_id: int, name: str, classes_per_week: int) -> int:
        raise NotImplementedError

    def update(self, *, subject_id: int, name: str, classes_per_week: int) -> bool:
        raise NotImplementedError

    def delete(self, *, subject_id: int) -> bool:
        raise NotImplementedError
