from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable

from .model import AttendanceCounts, AttendanceLedger, AttendanceRecord


@dataclass(frozen=True)
class TrendPoint:
    week: int
    percentage: float


def _week_index(origin: date, day: date) -> int:
    return (day - origin).days // 7


def _cumulative(weeks: dict[int, list[int]]) -> list[TrendPoint]:
    points: list[TrendPoint] = []
    total = AttendanceCounts(conducted=0, attended=0)
    for week in sorted(weeks):
        attended, conducted = weeks[week]
        total = AttendanceCounts(conducted=total.conducted + conducted, attended=total.attended + attended)
        points.append(TrendPoint(week=week, percentage=total.percentage))
    return points


def _bucket(records: Iterable[AttendanceRecord], origin: date, weeks: dict[int, list[int]]) -> None:
    for r in records:
        bucket = weeks.setdefault(_week_index(origin, r.date), [0, 0])
        bucket[1] += 1
        if r.present:
            bucket[0] += 1


def weekly_trend(ledger: AttendanceLedger) -> list[TrendPoint]:
    """Cumulative percentage at the end of each week that has records.

    Week 0 starts on the subject's first recorded date.
    """
    records = ledger.records()
    if not records:
        return []
    weeks: dict[int, list[int]] = {}
    _bucket(records, records[0].date, weeks)
    return _cumulative(weeks)


def overall_trend(ledgers: Iterable[AttendanceLedger]) -> list[TrendPoint]:
    """Combined cumulative trend across subjects, weeks counted from the earliest record anywhere."""
    snapshots = [ledger.records() for ledger in ledgers]
    firsts = [records[0].date for records in snapshots if records]
    if not firsts:
        return []
    origin = min(firsts)
    weeks: dict[int, list[int]] = {}
    for records in snapshots:
        _bucket(records, origin, weeks)
    return _cumulative(weeks)
