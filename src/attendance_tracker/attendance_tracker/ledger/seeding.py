from __future__ import annotations

from datetime import date, timedelta
from typing import TYPE_CHECKING, Optional

from ..blackouts.model import BlackoutCalendar
from ..common.datetime_utils import iter_days
from ..core.constants import SEED_LOOKBACK_PADDING_DAYS
from .model import AttendanceCounts, AttendanceRecord

if TYPE_CHECKING:
    from ..schedules.model import WeeklySchedule
    from ..subjects.model import Subject


def seed_start_date(conducted: int, scheduled_days: int, *, today: date) -> date:
    """Where to start laying records when no semester start is known."""
    lookback = conducted * 7 // max(scheduled_days, 1) + SEED_LOOKBACK_PADDING_DAYS
    return today - timedelta(days=lookback)


def initial_records(
    *,
    conducted: int,
    attended: int,
    subject: "Subject",
    schedule: "WeeklySchedule",
    calendar: BlackoutCalendar,
    today: date,
    semester_start: Optional[date] = None,
) -> list[AttendanceRecord]:
    """Lay out ``conducted`` records on past class days; the first ``attended`` are present.

    Used when a student starts tracking mid-semester and only knows the
    totals. Records go on the subject's class days, from the semester start
    (or a fallback look-back) up to today. Fewer records are produced if
    there are not enough class days in that span.
    """
    # Raises InvariantError when attended > conducted.
    AttendanceCounts(conducted=conducted, attended=attended)

    start = semester_start or seed_start_date(conducted, len(schedule.days_for(subject)), today=today)

    class_days: list[date] = []
    for day in iter_days(start, today):
        if len(class_days) >= conducted:
            break
        if calendar.is_class_day(subject, day, schedule):
            class_days.append(day)

    return [AttendanceRecord(date=day, present=i < attended) for i, day in enumerate(class_days)]
