from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable

from ..core.exceptions import InvariantError


def _percentage(attended: int, conducted: int) -> float:
    # An untaught subject counts as fully attended.
    if conducted == 0:
        return 100.0
    return attended / conducted * 100.0


@dataclass(frozen=True)
class AttendanceRecord:
    """One class on one date, attended or missed."""

    date: date
    present: bool


@dataclass(frozen=True)
class AttendanceCounts:
    """Immutable conducted/attended pair.

    Used as a snapshot of a ledger and as the shadow state when projecting
    absences or attendances that have not happened yet.
    """

    conducted: int
    attended: int

    def __post_init__(self) -> None:
        if self.conducted < 0 or self.attended < 0:
            raise InvariantError(f"counts cannot be negative (conducted={self.conducted}, attended={self.attended})")
        if self.attended > self.conducted:
            raise InvariantError(
                f"attended classes ({self.attended}) cannot be more than conducted classes ({self.conducted})"
            )

    @property
    def percentage(self) -> float:
        return _percentage(self.attended, self.conducted)

    def plus_absences(self, classes: int) -> "AttendanceCounts":
        return AttendanceCounts(conducted=self.conducted + classes, attended=self.attended)

    def plus_attended(self, classes: int) -> "AttendanceCounts":
        return AttendanceCounts(conducted=self.conducted + classes, attended=self.attended + classes)


class AttendanceLedger:
    """Dated presence records of a single subject.

    At most one record exists per date; writing an existing date overwrites
    its presence. Counts are derived from the current records on every call.
    """

    def __init__(self, records: Iterable[AttendanceRecord] = ()):
        self._by_date: dict[date, bool] = {}
        for record in records:
            self.record_attendance(record.date, record.present)

    @classmethod
    def from_records(cls, pairs: Iterable[tuple[date, bool]]) -> "AttendanceLedger":
        ledger = cls()
        for day, present in pairs:
            ledger.record_attendance(day, bool(present))
        return ledger

    def record_attendance(self, day: date, present: bool) -> None:
        self._by_date[day] = bool(present)

    def remove_record(self, day: date) -> None:
        self._by_date.pop(day, None)

    def has_record(self, day: date) -> bool:
        return day in self._by_date

    def clear(self) -> None:
        self._by_date.clear()

    @property
    def conducted(self) -> int:
        return len(self._by_date)

    @property
    def attended(self) -> int:
        return sum(1 for present in self._by_date.values() if present)

    @property
    def percentage(self) -> float:
        return _percentage(self.attended, self.conducted)

    def counts(self) -> AttendanceCounts:
        return AttendanceCounts(conducted=self.conducted, attended=self.attended)

    def records(self) -> tuple[AttendanceRecord, ...]:
        """Date-sorted snapshot; mutate through the ledger methods only."""
        return tuple(AttendanceRecord(date=d, present=p) for d, p in sorted(self._by_date.items()))

    def __len__(self) -> int:
        return len(self._by_date)

    def __repr__(self) -> str:
        return f"AttendanceLedger({self.attended}/{self.conducted}, {self.percentage:.2f}%)"
