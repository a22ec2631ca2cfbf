from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from ..core.enums import Weekday

if TYPE_CHECKING:
    from ..subjects.model import Subject


class WeeklySchedule:
    """Weekday -> ordered subjects meeting that day.

    Pure lookup structure; holidays and exam pauses are the calendar's job.
    """

    def __init__(self) -> None:
        self._timetable: dict[Weekday, list["Subject"]] = {day: [] for day in Weekday}

    @classmethod
    def from_edges(cls, edges: Iterable[tuple["Subject", Weekday]]) -> "WeeklySchedule":
        schedule = cls()
        for subject, weekday in edges:
            schedule.add_class(Weekday(weekday), subject)
        return schedule

    def add_class(self, weekday: Weekday, subject: "Subject") -> None:
        self._timetable[weekday].append(subject)

    def remove_subject(self, subject: "Subject") -> None:
        for day, subjects in self._timetable.items():
            self._timetable[day] = [s for s in subjects if s != subject]

    def subjects_on(self, weekday: Weekday) -> tuple["Subject", ...]:
        return tuple(self._timetable[weekday])

    def is_scheduled(self, subject: "Subject", weekday: Weekday) -> bool:
        return subject in self._timetable[weekday]

    def days_for(self, subject: "Subject") -> list[Weekday]:
        return [day for day in Weekday if subject in self._timetable[day]]

    def classes_count_for(self, subject: "Subject") -> int:
        return sum(1 for subjects in self._timetable.values() for s in subjects if s == subject)

    def edges(self) -> list[tuple["Subject", Weekday]]:
        return [(s, day) for day in Weekday for s in self._timetable[day]]
