from __future__ import annotations

from datetime import date

import pytest

from src.attendance_tracker.attendance_tracker.blackouts.model import BlackoutCalendar, ExamPause, Holiday
from src.attendance_tracker.attendance_tracker.core.constants import DEFAULT_HOLIDAY_DESCRIPTION
from src.attendance_tracker.attendance_tracker.core.enums import Weekday
from src.attendance_tracker.attendance_tracker.core.exceptions import ValidationError
from src.attendance_tracker.attendance_tracker.schedules.model import WeeklySchedule
from src.attendance_tracker.attendance_tracker.subjects.model import Subject


def test_exam_pause_is_inclusive_on_both_ends():
    calendar = BlackoutCalendar()
    calendar.set_exam_pause(date(2026, 9, 21), date(2026, 9, 26))

    assert calendar.is_exam_pause(date(2026, 9, 21))
    assert calendar.is_exam_pause(date(2026, 9, 26))
    assert not calendar.is_exam_pause(date(2026, 9, 20))
    assert not calendar.is_exam_pause(date(2026, 9, 27))


def test_exam_pause_rejects_end_before_start():
    with pytest.raises(ValidationError):
        ExamPause(start=date(2026, 9, 26), end=date(2026, 9, 21))


def test_blank_description_falls_back_to_default():
    calendar = BlackoutCalendar()

    assert calendar.add_holiday(date(2026, 10, 2), "  ").description == DEFAULT_HOLIDAY_DESCRIPTION
    assert Holiday(date=date(2026, 10, 3), description="").description == DEFAULT_HOLIDAY_DESCRIPTION


def test_holiday_range_covers_every_day():
    calendar = BlackoutCalendar()

    added = calendar.add_holiday_range(date(2026, 10, 20), date(2026, 10, 24), "Diwali Break")

    assert len(added) == 5
    assert all(calendar.is_holiday(h.date) for h in added)
    assert {h.description for h in calendar.holidays()} == {"Diwali Break"}


def test_holiday_range_rejects_reversed_dates():
    with pytest.raises(ValidationError):
        BlackoutCalendar().add_holiday_range(date(2026, 10, 24), date(2026, 10, 20))


def test_remove_by_description_returns_removed_dates():
    calendar = BlackoutCalendar()
    calendar.add_holiday_range(date(2026, 10, 20), date(2026, 10, 21), "Diwali Break")
    calendar.add_holiday(date(2026, 10, 2), "Gandhi Jayanti")

    removed = calendar.remove_by_description("Diwali Break")

    assert removed == [date(2026, 10, 20), date(2026, 10, 21)]
    assert calendar.holiday_dates() == frozenset({date(2026, 10, 2)})


def test_update_holiday_moves_it():
    calendar = BlackoutCalendar([Holiday(date=date(2026, 10, 2), description="Gandhi Jayanti")])

    updated = calendar.update_holiday(date(2026, 10, 2), date(2026, 10, 3))

    assert updated == Holiday(date=date(2026, 10, 3), description=DEFAULT_HOLIDAY_DESCRIPTION)
    assert not calendar.is_holiday(date(2026, 10, 2))
    assert calendar.update_holiday(date(2026, 10, 2), date(2026, 10, 4)) is None


def test_remove_holiday_reports_whether_it_existed():
    calendar = BlackoutCalendar([Holiday(date=date(2026, 10, 2))])

    assert calendar.remove_holiday(date(2026, 10, 2)) is True
    assert calendar.remove_holiday(date(2026, 10, 2)) is False


def test_is_class_day_needs_schedule_and_no_blackout():
    maths = Subject(name="Maths", subject_id=1)
    schedule = WeeklySchedule()
    schedule.add_class(Weekday.MONDAY, maths)

    calendar = BlackoutCalendar([Holiday(date=date(2026, 10, 26))])
    calendar.set_exam_pause(date(2026, 11, 2), date(2026, 11, 7))

    assert calendar.is_class_day(maths, date(2026, 10, 19), schedule)
    assert not calendar.is_class_day(maths, date(2026, 10, 20), schedule)  # Tuesday
    assert not calendar.is_class_day(maths, date(2026, 10, 26), schedule)  # holiday
    assert not calendar.is_class_day(maths, date(2026, 11, 2), schedule)  # exams
