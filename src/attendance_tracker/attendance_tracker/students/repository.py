from __future__ import annotations

from typing import Optional, Protocol

from .model import StudentRow


class StudentRepository(Protocol):
    def get_by_id(self, student_id: int) -> Optional[StudentRow]:
        raise NotImplementedError
