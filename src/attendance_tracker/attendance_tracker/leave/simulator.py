from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional

from ..common.datetime_utils import today_local
from ..common.validators import require_date_order, require_threshold
from ..core.constants import ATTENDANCE_THRESHOLD
from ..core.enums import LeaveVerdict, RecoveryOutcome
from ..eligibility import engine
from ..ledger.model import AttendanceCounts
from ..students.model import StudentContext
from ..subjects.model import Subject


@dataclass(frozen=True)
class SemesterProjection:
    """Outlook from the day after the leave to the last teaching day."""

    remaining_classes: int
    best_case_percentage: float
    can_still_miss: int
    must_attend: int
    outcome: RecoveryOutcome

    @property
    def recovery_impossible(self) -> bool:
        return self.outcome == RecoveryOutcome.IMPOSSIBLE


@dataclass(frozen=True)
class SubjectImpact:
    subject: Subject
    current_percentage: float
    post_leave_percentage: float
    classes_missed: int
    eligible_after_leave: bool
    projection: Optional[SemesterProjection] = None


@dataclass(frozen=True)
class LeaveImpactReport:
    start: date
    end: date
    impacts: tuple[SubjectImpact, ...]
    verdict: LeaveVerdict
    threshold: float

    @property
    def is_safe(self) -> bool:
        return self.verdict == LeaveVerdict.SAFE

    @property
    def at_risk(self) -> tuple[SubjectImpact, ...]:
        return tuple(i for i in self.impacts if not i.eligible_after_leave)


class LeaveImpactSimulator:
    """Projects what a planned leave does to every subject.

    The student is assumed absent on every class day in [start, end]. When a
    semester is configured and still running, each subject also gets a
    semester-end outlook that assumes every later class is attended.
    """

    def __init__(self, *, threshold: float = ATTENDANCE_THRESHOLD):
        self._threshold = require_threshold(threshold)

    @property
    def threshold(self) -> float:
        return self._threshold

    def simulate(
        self,
        context: StudentContext,
        start: date,
        end: date,
        *,
        today: Optional[date] = None,
    ) -> LeaveImpactReport:
        require_date_order(start, end, start_name="leave start", end_name="leave end")
        today = today or today_local()

        after_leave = engine.counts_after_leave(context.subjects, context.schedule, context.calendar, start, end)
        semester = context.semester
        project = semester is not None and not semester.is_over(today)

        impacts: list[SubjectImpact] = []
        for subject in context.subjects:
            counts = after_leave[subject]
            projection = None
            if project:
                projection = self._project(context, subject, counts, resume=end + timedelta(days=1))

            impacts.append(
                SubjectImpact(
                    subject=subject,
                    current_percentage=subject.ledger.percentage,
                    post_leave_percentage=counts.percentage,
                    classes_missed=counts.conducted - subject.ledger.conducted,
                    eligible_after_leave=engine.is_eligible(counts, threshold=self._threshold),
                    projection=projection,
                )
            )

        verdict = LeaveVerdict.SAFE if all(i.eligible_after_leave for i in impacts) else LeaveVerdict.AT_RISK
        return LeaveImpactReport(
            start=start,
            end=end,
            impacts=tuple(impacts),
            verdict=verdict,
            threshold=self._threshold,
        )

    def _project(
        self,
        context: StudentContext,
        subject: Subject,
        after_leave: AttendanceCounts,
        *,
        resume: date,
    ) -> SemesterProjection:
        last_day = context.semester.last_teaching_day
        remaining = 0
        if resume <= last_day:
            remaining = engine.count_class_days(subject, context.schedule, context.calendar, resume, last_day)

        best_case = after_leave.plus_attended(remaining)
        can_still_miss = min(engine.safe_bunks(best_case, threshold=self._threshold), remaining)
        must_attend = engine.recovery_classes(after_leave, threshold=self._threshold)

        if must_attend == 0:
            outcome = RecoveryOutcome.NOT_NEEDED
        elif must_attend > remaining:
            outcome = RecoveryOutcome.IMPOSSIBLE
        else:
            outcome = RecoveryOutcome.RECOVERABLE

        return SemesterProjection(
            remaining_classes=remaining,
            best_case_percentage=best_case.percentage,
            can_still_miss=can_still_miss,
            must_attend=must_attend,
            outcome=outcome,
        )
