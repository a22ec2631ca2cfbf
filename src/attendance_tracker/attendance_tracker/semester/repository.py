from __future__ import annotations

from typing import Optional, Protocol

from .model import SemesterWindow


class SemesterRepository(Protocol):
    def get_for_student(self, student_id: int) -> Optional[SemesterWindow]:
        raise NotImplementedError

    def save(self, *, student_id: int, window: Optional[SemesterWindow]) -> None:
        """Persist the semester dates; ``None`` resets them."""

        raise NotImplementedError
