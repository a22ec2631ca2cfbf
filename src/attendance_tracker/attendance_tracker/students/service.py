from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional, Sequence

from ..blackouts.model import BlackoutCalendar
from ..blackouts.repository import HolidayRepository
from ..common.datetime_utils import today_local
from ..common.validators import require_date_order, require_non_empty, require_threshold
from ..core.constants import ATTENDANCE_THRESHOLD
from ..core.enums import Weekday
from ..core.exceptions import NotFoundError, ValidationError
from ..eligibility.status import SubjectStatus, subject_status
from ..leave.simulator import LeaveImpactReport, LeaveImpactSimulator
from ..ledger.model import AttendanceLedger
from ..ledger.repository import AttendanceRepository
from ..ledger.seeding import initial_records
from ..ledger.trends import overall_trend, weekly_trend
from ..schedules.model import WeeklySchedule
from ..schedules.repository import ScheduleRepository
from ..semester.model import SemesterWindow
from ..semester.repository import SemesterRepository
from ..subjects.model import Subject
from ..subjects.repository import SubjectRepository
from .model import StudentContext
from .repository import StudentRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MarkResult:
    """Outcome of marking attendance; ``extra_class`` when the weekday is not on the timetable."""

    status: SubjectStatus
    extra_class: bool


class TrackerService:
    """Loads a student's context from the repositories and keeps both in sync.

    Each call loads a fresh context; the engine only ever sees that snapshot.
    """

    def __init__(
        self,
        students: StudentRepository,
        subjects: SubjectRepository,
        attendance: AttendanceRepository,
        holidays: HolidayRepository,
        schedules: ScheduleRepository,
        semesters: SemesterRepository,
        *,
        threshold: float = ATTENDANCE_THRESHOLD,
    ):
        self._students = students
        self._subjects = subjects
        self._attendance = attendance
        self._holidays = holidays
        self._schedules = schedules
        self._semesters = semesters
        self._threshold = require_threshold(threshold)
        self._simulator = LeaveImpactSimulator(threshold=self._threshold)

    # -- loading ------------------------------------------------------------

    def load_context(self, student_id: int) -> StudentContext:
        student = self._students.get_by_id(int(student_id))
        if not student:
            raise NotFoundError("Student not found")

        context = StudentContext(
            name=student.name,
            student_id=student.student_id,
            schedule=WeeklySchedule(),
            calendar=BlackoutCalendar(self._holidays.list_for_student(student.student_id)),
        )

        for subject in self._subjects.list_for_student(student.student_id):
            subject.ledger = AttendanceLedger(self._attendance.list_for_subject(subject.subject_id))
            context.add_subject(subject)
            for day in self._schedules.list_days_for_subject(subject.subject_id):
                context.schedule.add_class(day, subject)

        window = self._semesters.get_for_student(student.student_id)
        if window is not None:
            context.configure_semester(window)
        return context

    # -- queries ------------------------------------------------------------

    def statuses(self, student_id: int, *, today: Optional[date] = None) -> list[SubjectStatus]:
        today = today or today_local()
        context = self.load_context(student_id)
        return [self._status(context, s, today) for s in context.subjects]

    def leave_impact(
        self,
        student_id: int,
        *,
        start: date,
        end: date,
        today: Optional[date] = None,
    ) -> LeaveImpactReport:
        require_date_order(start, end, start_name="leave start", end_name="leave end")
        context = self.load_context(student_id)
        return self._simulator.simulate(context, start, end, today=today)

    def trends(self, student_id: int) -> dict:
        """Weekly cumulative percentages per subject name plus the combined line."""
        context = self.load_context(student_id)
        return {
            "subjects": {s.name: weekly_trend(s.ledger) for s in context.subjects},
            "overall": overall_trend(s.ledger for s in context.subjects),
        }

    # -- attendance ---------------------------------------------------------

    def mark_attendance(
        self,
        *,
        student_id: int,
        subject_id: int,
        day: date,
        present: bool,
        today: Optional[date] = None,
    ) -> MarkResult:
        today = today or today_local()
        context = self.load_context(student_id)
        subject = context.find_subject(int(subject_id))

        semester = context.semester
        if semester is not None and day < semester.start:
            raise ValidationError(f"Date is before semester start ({semester.start})")
        if semester is not None and day > semester.last_teaching_day:
            raise ValidationError(f"Date is after semester ends ({semester.last_teaching_day})")

        subject.ledger.record_attendance(day, present)
        self._attendance.upsert(subject_id=subject.subject_id, record_date=day, present=bool(present))
        logger.info("Marked %s %s on %s", subject.name, "present" if present else "absent", day)

        return MarkResult(
            status=self._status(context, subject, today),
            extra_class=not context.schedule.is_scheduled(subject, Weekday.of(day)),
        )

    def remove_attendance(self, *, student_id: int, subject_id: int, day: date) -> None:
        context = self.load_context(student_id)
        subject = context.find_subject(int(subject_id))
        if not subject.ledger.has_record(day):
            raise NotFoundError(f"No attendance recorded on {day}")
        subject.ledger.remove_record(day)
        self._attendance.delete(subject_id=subject.subject_id, record_date=day)

    def seed_attendance(
        self,
        *,
        student_id: int,
        subject_id: int,
        conducted: int,
        attended: int,
        today: Optional[date] = None,
    ) -> int:
        """Replace a subject's history with ``conducted`` synthetic records. Returns records written."""
        today = today or today_local()
        context = self.load_context(student_id)
        subject = context.find_subject(int(subject_id))

        records = initial_records(
            conducted=int(conducted),
            attended=int(attended),
            subject=subject,
            schedule=context.schedule,
            calendar=context.calendar,
            today=today,
            semester_start=context.semester.start if context.semester else None,
        )
        self._attendance.replace_for_subject(subject_id=subject.subject_id, records=records)
        logger.info("Seeded %d records for %s", len(records), subject.name)
        return len(records)

    # -- subjects & timetable ----------------------------------------------

    def add_subject(
        self,
        *,
        student_id: int,
        name: str,
        classes_per_week: int = 0,
        days: Sequence[Weekday] = (),
    ) -> int:
        name = require_non_empty(name, "Subject name")
        if int(classes_per_week) < 0:
            raise ValidationError("Classes per week cannot be negative")

        context = self.load_context(student_id)
        if any(s.name == name for s in context.subjects):
            raise ValidationError(f"Subject '{name}' already exists")

        subject_id = self._subjects.add(student_id=context.student_id, name=name, classes_per_week=int(classes_per_week))
        if days:
            self._schedules.replace_for_subject(subject_id=subject_id, days=list(dict.fromkeys(days)))
        return subject_id

    def delete_subject(self, *, student_id: int, subject_id: int) -> None:
        context = self.load_context(student_id)
        subject = context.find_subject(int(subject_id))
        if not self._subjects.delete(subject_id=subject.subject_id):
            raise ValidationError("Deleting subject failed")

    def set_schedule(self, *, student_id: int, subject_id: int, days: Sequence[Weekday]) -> None:
        context = self.load_context(student_id)
        subject = context.find_subject(int(subject_id))
        self._schedules.replace_for_subject(subject_id=subject.subject_id, days=list(dict.fromkeys(days)))

    # -- holidays -----------------------------------------------------------

    def add_holiday(self, *, student_id: int, day: date, description: Optional[str] = None) -> int:
        """Add a holiday and clear attendance already recorded on it. Returns records cleared."""
        return self.add_holiday_range(student_id=student_id, start=day, end=day, description=description)

    def add_holiday_range(
        self,
        *,
        student_id: int,
        start: date,
        end: date,
        description: Optional[str] = None,
    ) -> int:
        context = self.load_context(student_id)
        added = context.calendar.add_holiday_range(start, end, description)
        desc = added[0].description

        if start == end:
            self._holidays.upsert(student_id=context.student_id, holiday_date=start, description=desc)
        else:
            self._holidays.upsert_range(student_id=context.student_id, start=start, end=end, description=desc)

        cleared = self._attendance.delete_for_student_in_range(student_id=context.student_id, start=start, end=end)
        if cleared:
            logger.info("Cleared %d attendance records on new holiday %s..%s", cleared, start, end)
        return cleared

    def remove_holiday(self, *, student_id: int, day: date) -> None:
        context = self.load_context(student_id)
        if not self._holidays.delete(student_id=context.student_id, holiday_date=day):
            raise NotFoundError(f"No holiday on {day}")

    def remove_holidays_by_description(self, *, student_id: int, description: str) -> int:
        description = require_non_empty(description, "Holiday description")
        context = self.load_context(student_id)
        return self._holidays.delete_by_description(student_id=context.student_id, description=description)

    def update_holiday(self, *, student_id: int, old_date: date, new_date: date, description: Optional[str] = None) -> None:
        context = self.load_context(student_id)
        updated = context.calendar.update_holiday(old_date, new_date, description)
        if updated is None:
            raise NotFoundError(f"No holiday on {old_date}")
        self._holidays.update(
            student_id=context.student_id,
            old_date=old_date,
            new_date=new_date,
            description=updated.description,
        )

    # -- semester -----------------------------------------------------------

    def configure_semester(self, *, student_id: int, window: SemesterWindow) -> None:
        context = self.load_context(student_id)
        context.configure_semester(window)
        self._semesters.save(student_id=context.student_id, window=window)

    def reset_semester(self, *, student_id: int) -> None:
        context = self.load_context(student_id)
        context.reset_semester()
        self._semesters.save(student_id=context.student_id, window=None)

    # -- helpers ------------------------------------------------------------

    def _status(self, context: StudentContext, subject: Subject, today: date) -> SubjectStatus:
        return subject_status(
            subject,
            context.schedule,
            context.calendar,
            context.semester,
            today=today,
            threshold=self._threshold,
        )
