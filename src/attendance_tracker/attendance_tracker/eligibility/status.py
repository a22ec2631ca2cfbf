from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..blackouts.model import BlackoutCalendar
from ..core.constants import ATTENDANCE_THRESHOLD
from ..core.enums import StatusLevel
from ..schedules.model import WeeklySchedule
from ..semester.model import SemesterWindow
from ..subjects.model import Subject
from . import engine


@dataclass(frozen=True)
class SubjectStatus:
    """Read-model for a subject card (current state, no leave applied)."""

    subject_id: Optional[int]
    name: str
    attended: int
    conducted: int
    percentage: float
    eligible: bool
    level: StatusLevel
    safe_bunks: int
    recovery_classes: int
    message: str
    remaining_classes: Optional[int] = None
    max_possible: Optional[float] = None


def subject_status(
    subject: Subject,
    schedule: WeeklySchedule,
    calendar: BlackoutCalendar,
    semester: Optional[SemesterWindow],
    *,
    today: date,
    threshold: float = ATTENDANCE_THRESHOLD,
) -> SubjectStatus:
    """Summarise a subject against the threshold.

    With a running semester the advice is bounded by the classes left before
    the last teaching day. Without one (or once it is over) the infinite
    horizon applies: safe bunks and recovery come from the ledger alone.
    """
    ledger = subject.ledger
    eligible = engine.is_eligible(ledger, threshold=threshold)
    bunks = engine.safe_bunks(ledger, threshold=threshold)
    recovery = engine.recovery_classes(ledger, threshold=threshold)

    remaining: Optional[int] = None
    max_possible: Optional[float] = None

    if semester is not None and not semester.is_over(today):
        remaining = engine.remaining_classes(subject, schedule, calendar, semester.last_teaching_day, today=today)
        max_possible = engine.max_possible_attendance(ledger, remaining)
        if eligible:
            bunks = min(bunks, remaining)
            level = StatusLevel.SAFE
            message = f"Safe! Can miss {bunks}/{remaining} remaining."
        elif not engine.is_eligible(ledger.counts().plus_attended(remaining), threshold=threshold):
            level = StatusLevel.CRITICAL
            message = f"Critical: max possible is only {max_possible:.1f}%!"
        else:
            level = StatusLevel.WARNING
            message = f"Warning! Attend next {recovery} classes. (Rem: {remaining})"
    elif eligible:
        level = StatusLevel.SAFE
        message = f"Safe! You can bunk {bunks} classes."
    else:
        level = StatusLevel.WARNING
        message = f"Warning! Attend next {recovery} classes!"

    return SubjectStatus(
        subject_id=subject.subject_id,
        name=subject.name,
        attended=ledger.attended,
        conducted=ledger.conducted,
        percentage=ledger.percentage,
        eligible=eligible,
        level=level,
        safe_bunks=bunks,
        recovery_classes=recovery,
        message=message,
        remaining_classes=remaining,
        max_possible=max_possible,
    )
