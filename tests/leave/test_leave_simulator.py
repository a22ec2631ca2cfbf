from __future__ import annotations

from datetime import date, timedelta

import pytest

from src.attendance_tracker.attendance_tracker.core.enums import LeaveVerdict, RecoveryOutcome, Weekday
from src.attendance_tracker.attendance_tracker.core.exceptions import ValidationError
from src.attendance_tracker.attendance_tracker.leave.simulator import LeaveImpactSimulator
from src.attendance_tracker.attendance_tracker.ledger.model import AttendanceLedger
from src.attendance_tracker.attendance_tracker.semester.model import SemesterWindow
from src.attendance_tracker.attendance_tracker.students.model import StudentContext
from src.attendance_tracker.attendance_tracker.subjects.model import Subject

TODAY = date(2026, 10, 19)  # Monday


def _ledger(conducted: int, attended: int) -> AttendanceLedger:
    start = date(2026, 7, 20)
    return AttendanceLedger.from_records((start + timedelta(days=i), i < attended) for i in range(conducted))


def _context(*, with_semester: bool = True) -> StudentContext:
    context = StudentContext(name="Demo", student_id=1)

    maths = context.add_subject(Subject(name="Maths", subject_id=1, ledger=_ledger(36, 30)))
    physics = context.add_subject(Subject(name="Physics", subject_id=2, ledger=_ledger(20, 15)))
    for day in (Weekday.MONDAY, Weekday.WEDNESDAY, Weekday.FRIDAY):
        context.schedule.add_class(day, maths)
    for day in (Weekday.TUESDAY, Weekday.THURSDAY):
        context.schedule.add_class(day, physics)

    if with_semester:
        context.configure_semester(
            SemesterWindow(
                start=date(2026, 7, 20),
                last_teaching_day=date(2026, 11, 20),
                exam_start=date(2026, 9, 21),
                exam_end=date(2026, 9, 26),
            )
        )
    return context


def _impact(report, name: str):
    return next(i for i in report.impacts if i.subject.name == name)


def test_week_of_leave_puts_physics_at_risk():
    report = LeaveImpactSimulator().simulate(_context(), date(2026, 10, 26), date(2026, 10, 30), today=TODAY)

    maths = _impact(report, "Maths")
    physics = _impact(report, "Physics")

    assert maths.classes_missed == 3
    assert maths.post_leave_percentage == pytest.approx(30 / 39 * 100)
    assert maths.eligible_after_leave

    assert physics.classes_missed == 2
    assert physics.post_leave_percentage == pytest.approx(15 / 22 * 100)
    assert not physics.eligible_after_leave

    assert report.verdict == LeaveVerdict.AT_RISK
    assert not report.is_safe
    assert [i.subject.name for i in report.at_risk] == ["Physics"]


def test_semester_projection_after_leave():
    report = LeaveImpactSimulator().simulate(_context(), date(2026, 10, 26), date(2026, 10, 30), today=TODAY)

    maths = _impact(report, "Maths").projection
    assert maths.remaining_classes == 9
    assert maths.best_case_percentage == 81.25
    assert maths.can_still_miss == 4
    assert maths.must_attend == 0
    assert maths.outcome == RecoveryOutcome.NOT_NEEDED

    physics = _impact(report, "Physics").projection
    assert physics.remaining_classes == 6
    assert physics.best_case_percentage == 75.0
    assert physics.can_still_miss == 0
    assert physics.must_attend == 6
    assert physics.outcome == RecoveryOutcome.RECOVERABLE
    assert not physics.recovery_impossible


def test_recovery_impossible_when_too_few_classes_remain():
    context = _context()
    context.calendar.add_holiday(date(2026, 11, 19))

    report = LeaveImpactSimulator().simulate(context, date(2026, 10, 26), date(2026, 10, 30), today=TODAY)

    physics = _impact(report, "Physics").projection
    assert physics.remaining_classes == 5
    assert physics.must_attend == 6
    assert physics.outcome == RecoveryOutcome.IMPOSSIBLE
    assert physics.recovery_impossible


def test_holiday_inside_leave_is_not_an_absence():
    context = _context()
    context.calendar.add_holiday(date(2026, 10, 27))

    report = LeaveImpactSimulator().simulate(context, date(2026, 10, 26), date(2026, 10, 30), today=TODAY)

    physics = _impact(report, "Physics")
    assert physics.classes_missed == 1
    assert physics.post_leave_percentage == pytest.approx(15 / 21 * 100)


def test_weekend_leave_changes_nothing():
    report = LeaveImpactSimulator().simulate(_context(), date(2026, 10, 24), date(2026, 10, 25), today=TODAY)

    for impact in report.impacts:
        assert impact.classes_missed == 0
        assert impact.post_leave_percentage == impact.current_percentage
    assert report.verdict == LeaveVerdict.SAFE
    assert report.is_safe


def test_no_projection_without_semester():
    report = LeaveImpactSimulator().simulate(
        _context(with_semester=False),
        date(2026, 10, 26),
        date(2026, 10, 30),
        today=TODAY,
    )

    assert all(i.projection is None for i in report.impacts)


def test_no_projection_once_semester_is_over():
    report = LeaveImpactSimulator().simulate(_context(), date(2026, 11, 23), date(2026, 11, 24), today=date(2026, 11, 21))

    assert all(i.projection is None for i in report.impacts)


def test_leave_past_last_teaching_day_leaves_nothing_to_attend():
    report = LeaveImpactSimulator().simulate(_context(), date(2026, 11, 16), date(2026, 11, 25), today=TODAY)

    assert all(i.projection.remaining_classes == 0 for i in report.impacts)


def test_simulation_does_not_modify_ledgers():
    context = _context()

    LeaveImpactSimulator().simulate(context, date(2026, 10, 26), date(2026, 11, 20), today=TODAY)

    assert [(s.ledger.conducted, s.ledger.attended) for s in context.subjects] == [(36, 30), (20, 15)]


def test_leave_end_before_start_is_rejected():
    with pytest.raises(ValidationError):
        LeaveImpactSimulator().simulate(_context(), date(2026, 10, 30), date(2026, 10, 26), today=TODAY)


def test_threshold_must_be_a_percentage():
    with pytest.raises(ValidationError):
        LeaveImpactSimulator(threshold=100)


def test_other_threshold_changes_the_verdict():
    report = LeaveImpactSimulator(threshold=65.0).simulate(
        _context(),
        date(2026, 10, 26),
        date(2026, 10, 30),
        today=TODAY,
    )

    assert report.verdict == LeaveVerdict.SAFE
    assert report.threshold == 65.0
