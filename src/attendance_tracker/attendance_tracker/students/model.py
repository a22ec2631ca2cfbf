from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..blackouts.model import BlackoutCalendar
from ..core.exceptions import NotFoundError
from ..schedules.model import WeeklySchedule
from ..semester.model import SemesterWindow
from ..subjects.model import Subject


@dataclass(frozen=True)
class StudentRow:
    student_id: int
    name: str
    username: str


@dataclass
class StudentContext:
    """Everything the engine needs about one student.

    The calendar's exam pause always mirrors the semester's exam window;
    change both through ``configure_semester`` / ``reset_semester``.
    """

    name: str
    student_id: Optional[int] = None
    schedule: WeeklySchedule = field(default_factory=WeeklySchedule)
    calendar: BlackoutCalendar = field(default_factory=BlackoutCalendar)
    semester: Optional[SemesterWindow] = None
    _subjects: list[Subject] = field(default_factory=list, repr=False)

    @property
    def subjects(self) -> tuple[Subject, ...]:
        return tuple(self._subjects)

    def add_subject(self, subject: Subject) -> Subject:
        if subject not in self._subjects:
            self._subjects.append(subject)
        return subject

    def remove_subject(self, subject: Subject) -> None:
        self._subjects = [s for s in self._subjects if s != subject]
        self.schedule.remove_subject(subject)

    def find_subject(self, subject_id: int) -> Subject:
        for s in self._subjects:
            if s.subject_id == subject_id:
                return s
        raise NotFoundError(f"Subject {subject_id} not found")

    def configure_semester(self, window: SemesterWindow) -> None:
        self.semester = window
        pause = window.exam_pause()
        if pause is None:
            self.calendar.clear_exam_pause()
        else:
            self.calendar.set_exam_pause(pause.start, pause.end)

    def reset_semester(self) -> None:
        self.semester = None
        self.calendar.clear_exam_pause()

    @property
    def is_semester_configured(self) -> bool:
        return self.semester is not None
