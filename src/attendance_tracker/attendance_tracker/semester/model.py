from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..blackouts.model import ExamPause
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class SemesterWindow:
    """Teaching period of a semester with an optional mid-semester exam pause."""

    start: date
    last_teaching_day: date
    exam_start: Optional[date] = None
    exam_end: Optional[date] = None

    def __post_init__(self) -> None:
        if self.last_teaching_day < self.start:
            raise ValidationError("Last teaching day cannot be before semester start")

        if (self.exam_start is None) != (self.exam_end is None):
            raise ValidationError("Exam start and exam end must be given together")

        if self.exam_start is not None and self.exam_end is not None:
            if self.exam_end < self.exam_start:
                raise ValidationError("Exam end cannot be before exam start")
            if self.exam_start < self.start or self.exam_end > self.last_teaching_day:
                raise ValidationError("Exam dates must fall within the semester period")

    def exam_pause(self) -> Optional[ExamPause]:
        if self.exam_start is None or self.exam_end is None:
            return None
        return ExamPause(start=self.exam_start, end=self.exam_end)

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.last_teaching_day

    def is_over(self, today: date) -> bool:
        return self.last_teaching_day <= today
