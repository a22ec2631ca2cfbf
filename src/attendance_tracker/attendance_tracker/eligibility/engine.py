"""Eligibility arithmetic over attendance counts.

Every function here is pure: it reads a ledger (or an ``AttendanceCounts``
snapshot), a schedule and a blackout calendar and returns a fresh value.
Nothing is mutated and nothing is logged; errors are raised to the caller.

All threshold-dependent numbers are derived from ``threshold`` (default
``ATTENDANCE_THRESHOLD``) so that constant stays the only policy knob.
"""

from __future__ import annotations

import math
from datetime import date, timedelta
from fractions import Fraction
from typing import Iterable, Optional, Protocol

from ..blackouts.model import BlackoutCalendar
from ..common.datetime_utils import iter_days, today_local
from ..common.validators import require_date_order, require_threshold
from ..core.constants import ATTENDANCE_THRESHOLD
from ..core.exceptions import ValidationError
from ..ledger.model import AttendanceCounts
from ..schedules.model import WeeklySchedule
from ..subjects.model import Subject


class Tally(Protocol):
    """Anything exposing conducted/attended counts (a ledger or a snapshot)."""

    @property
    def conducted(self) -> int:
        raise NotImplementedError

    @property
    def attended(self) -> int:
        raise NotImplementedError

    @property
    def percentage(self) -> float:
        raise NotImplementedError


def _snapshot(tally: Tally) -> AttendanceCounts:
    if isinstance(tally, AttendanceCounts):
        return tally
    return AttendanceCounts(conducted=tally.conducted, attended=tally.attended)


def is_eligible(tally: Tally, *, threshold: float = ATTENDANCE_THRESHOLD) -> bool:
    """attended / conducted >= threshold, compared exactly; an untaught subject is eligible."""
    t = Fraction(require_threshold(threshold))
    if tally.conducted == 0:
        return True
    return Fraction(tally.attended * 100, tally.conducted) >= t


def safe_bunks(tally: Tally, *, threshold: float = ATTENDANCE_THRESHOLD) -> int:
    """Largest x with attended / (conducted + x) >= threshold; 0 when not eligible.

    Solved as floor(attended / ratio - conducted) in exact arithmetic.
    """
    if not is_eligible(tally, threshold=threshold):
        return 0
    ratio = Fraction(require_threshold(threshold)) / 100
    return max(math.floor(Fraction(tally.attended) / ratio - tally.conducted), 0)


def recovery_constants(threshold: float = ATTENDANCE_THRESHOLD) -> tuple[Fraction, Fraction]:
    """Coefficients (C, D) of the recovery bound x >= C*conducted - D*attended.

    From (attended + x) / (conducted + x) >= T/100:
    C = T / (100 - T) and D = 100 / (100 - T), i.e. 3 and 4 at 75%.
    """
    t = Fraction(require_threshold(threshold))
    return t / (100 - t), Fraction(100) / (100 - t)


def recovery_classes(tally: Tally, *, threshold: float = ATTENDANCE_THRESHOLD) -> int:
    """Fewest consecutive attended classes that bring the subject back to threshold."""
    if is_eligible(tally, threshold=threshold):
        return 0
    c, d = recovery_constants(threshold)
    return max(math.ceil(c * tally.conducted - d * tally.attended), 0)


def count_class_days(
    subject: Subject,
    schedule: WeeklySchedule,
    calendar: BlackoutCalendar,
    start: date,
    end: date,
) -> int:
    """Class days for ``subject`` in [start, end], both ends inclusive."""
    require_date_order(start, end)
    return sum(1 for day in iter_days(start, end) if calendar.is_class_day(subject, day, schedule))


def remaining_classes(
    subject: Subject,
    schedule: WeeklySchedule,
    calendar: BlackoutCalendar,
    end_date: Optional[date],
    *,
    today: Optional[date] = None,
) -> int:
    """Class days in (today, end_date]; 0 when there is no end date or it has passed."""
    today = today or today_local()
    first = today + timedelta(days=1)
    if end_date is None or end_date < first:
        return 0
    return count_class_days(subject, schedule, calendar, first, end_date)


def max_possible_attendance(tally: Tally, remaining: int) -> float:
    """Best-case percentage if every one of ``remaining`` classes is attended."""
    if remaining < 0:
        raise ValidationError(f"remaining classes cannot be negative, got {remaining}")
    return _snapshot(tally).plus_attended(remaining).percentage


def counts_after_leave(
    subjects: Iterable[Subject],
    schedule: WeeklySchedule,
    calendar: BlackoutCalendar,
    start: date,
    end: date,
) -> dict[Subject, AttendanceCounts]:
    """Shadow counts per subject assuming every class in [start, end] is missed."""
    require_date_order(start, end, start_name="leave start", end_name="leave end")
    return {
        s: s.ledger.counts().plus_absences(count_class_days(s, schedule, calendar, start, end))
        for s in subjects
    }


def predict_after_leave(
    subjects: Iterable[Subject],
    schedule: WeeklySchedule,
    calendar: BlackoutCalendar,
    start: date,
    end: date,
) -> dict[Subject, float]:
    projected = counts_after_leave(subjects, schedule, calendar, start, end)
    return {s: counts.percentage for s, counts in projected.items()}
