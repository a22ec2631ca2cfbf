from __future__ import annotations

from datetime import date

from src.attendance_tracker.attendance_tracker.core.enums import Weekday
from src.attendance_tracker.attendance_tracker.schedules.model import WeeklySchedule
from src.attendance_tracker.attendance_tracker.subjects.model import Subject


def test_unscheduled_day_is_empty():
    assert WeeklySchedule().subjects_on(Weekday.SUNDAY) == ()


def test_subjects_keep_insertion_order():
    maths = Subject(name="Maths", subject_id=1)
    physics = Subject(name="Physics", subject_id=2)
    schedule = WeeklySchedule()
    schedule.add_class(Weekday.MONDAY, physics)
    schedule.add_class(Weekday.MONDAY, maths)

    assert schedule.subjects_on(Weekday.MONDAY) == (physics, maths)


def test_from_edges_and_lookups():
    maths = Subject(name="Maths", subject_id=1)
    physics = Subject(name="Physics", subject_id=2)
    schedule = WeeklySchedule.from_edges(
        [
            (maths, Weekday.MONDAY),
            (maths, Weekday.WEDNESDAY),
            (physics, Weekday.TUESDAY),
        ]
    )

    assert schedule.is_scheduled(maths, Weekday.WEDNESDAY)
    assert not schedule.is_scheduled(physics, Weekday.WEDNESDAY)
    assert schedule.days_for(maths) == [Weekday.MONDAY, Weekday.WEDNESDAY]
    assert schedule.classes_count_for(maths) == 2
    assert len(schedule.edges()) == 3


def test_remove_subject_clears_every_day():
    maths = Subject(name="Maths", subject_id=1)
    schedule = WeeklySchedule.from_edges([(maths, Weekday.MONDAY), (maths, Weekday.FRIDAY)])

    schedule.remove_subject(maths)

    assert schedule.days_for(maths) == []


def test_weekday_of_date():
    assert Weekday.of(date(2026, 10, 19)) == Weekday.MONDAY
    assert Weekday.of(date(2026, 10, 25)) == Weekday.SUNDAY


def test_subject_identity_is_the_name():
    maths = Subject(name="Maths", subject_id=1)

    assert maths == Subject(name="Maths")
    assert maths != Subject(name="Mathematics", subject_id=1)
    assert hash(maths) == hash(Subject(name="Maths", subject_id=3))


def test_equal_subjects_find_each_other_in_dicts():
    by_subject = {Subject(name="Maths", subject_id=1): "Mon"}

    assert by_subject[Subject(name="Maths")] == "Mon"
    assert Subject(name="Mathematics", subject_id=1) not in by_subject
