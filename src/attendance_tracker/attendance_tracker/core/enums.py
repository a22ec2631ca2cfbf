from __future__ import annotations

from datetime import date
from enum import Enum


class Weekday(str, Enum):
    """Day of week, stored by name in the ``weekly_schedule`` table."""

    MONDAY = "MONDAY"
    TUESDAY = "TUESDAY"
    WEDNESDAY = "WEDNESDAY"
    THURSDAY = "THURSDAY"
    FRIDAY = "FRIDAY"
    SATURDAY = "SATURDAY"
    SUNDAY = "SUNDAY"

    @classmethod
    def of(cls, day: date) -> "Weekday":
        return _ORDERED[day.weekday()]


_ORDERED = tuple(Weekday)


class StatusLevel(str, Enum):
    """Traffic-light state of a subject on the dashboard."""

    SAFE = "SAFE"
    WARNING = "WARNING"
    CRITICAL = "CRITICAL"


class RecoveryOutcome(str, Enum):
    """Whether a subject can get back to the threshold before the semester ends."""

    NOT_NEEDED = "NOT_NEEDED"
    RECOVERABLE = "RECOVERABLE"
    IMPOSSIBLE = "IMPOSSIBLE"


class LeaveVerdict(str, Enum):
    SAFE = "SAFE"
    AT_RISK = "AT_RISK"
