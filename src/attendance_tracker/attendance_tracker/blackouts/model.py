from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING, Optional

from ..common.datetime_utils import iter_days
from ..common.validators import require_date_order
from ..core.constants import DEFAULT_HOLIDAY_DESCRIPTION
from ..core.enums import Weekday

if TYPE_CHECKING:
    from ..schedules.model import WeeklySchedule
    from ..subjects.model import Subject


def _description_or_default(description: Optional[str]) -> str:
    return description.strip() if description and description.strip() else DEFAULT_HOLIDAY_DESCRIPTION


@dataclass(frozen=True)
class Holiday:
    date: date
    description: str = DEFAULT_HOLIDAY_DESCRIPTION

    def __post_init__(self) -> None:
        object.__setattr__(self, "description", _description_or_default(self.description))


@dataclass(frozen=True)
class ExamPause:
    """Inclusive window in which no classes are held (e.g. mid-semester exams)."""

    start: date
    end: date

    def __post_init__(self) -> None:
        require_date_order(self.start, self.end, start_name="exam start", end_name="exam end")

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end


class BlackoutCalendar:
    """Holidays plus at most one exam pause.

    ``is_class_day`` is the one predicate every projection uses to decide
    whether a scheduled class actually takes place.
    """

    def __init__(self, holidays: tuple[Holiday, ...] | list[Holiday] = (), exam_pause: Optional[ExamPause] = None):
        self._holidays: dict[date, Holiday] = {}
        for h in holidays:
            self._holidays[h.date] = h
        self._exam_pause = exam_pause

    # -- reads --------------------------------------------------------------

    def is_holiday(self, day: date) -> bool:
        return day in self._holidays

    def is_exam_pause(self, day: date) -> bool:
        return self._exam_pause is not None and self._exam_pause.contains(day)

    def is_blackout(self, day: date) -> bool:
        return self.is_holiday(day) or self.is_exam_pause(day)

    def is_class_day(self, subject: "Subject", day: date, schedule: "WeeklySchedule") -> bool:
        return schedule.is_scheduled(subject, Weekday.of(day)) and not self.is_blackout(day)

    @property
    def exam_pause(self) -> Optional[ExamPause]:
        return self._exam_pause

    def holidays(self) -> tuple[Holiday, ...]:
        return tuple(self._holidays[d] for d in sorted(self._holidays))

    def holiday_dates(self) -> frozenset[date]:
        return frozenset(self._holidays)

    def get_holiday(self, day: date) -> Optional[Holiday]:
        return self._holidays.get(day)

    # -- mutation -----------------------------------------------------------

    def add_holiday(self, day: date, description: Optional[str] = None) -> Holiday:
        holiday = Holiday(date=day, description=_description_or_default(description))
        self._holidays[day] = holiday
        return holiday

    def add_holiday_range(self, start: date, end: date, description: Optional[str] = None) -> list[Holiday]:
        require_date_order(start, end, start_name="holiday range start", end_name="holiday range end")
        return [self.add_holiday(day, description) for day in iter_days(start, end)]

    def remove_holiday(self, day: date) -> bool:
        return self._holidays.pop(day, None) is not None

    def remove_by_description(self, description: str) -> list[date]:
        removed = sorted(d for d, h in self._holidays.items() if h.description == description)
        for d in removed:
            del self._holidays[d]
        return removed

    def update_holiday(self, old_date: date, new_date: date, description: Optional[str] = None) -> Optional[Holiday]:
        if old_date not in self._holidays:
            return None
        del self._holidays[old_date]
        return self.add_holiday(new_date, description)

    def set_exam_pause(self, start: date, end: date) -> ExamPause:
        self._exam_pause = ExamPause(start=start, end=end)
        return self._exam_pause

    def clear_exam_pause(self) -> None:
        self._exam_pause = None
