from __future__ import annotations

from datetime import date, timedelta

import pytest

from src.attendance_tracker.attendance_tracker.core.exceptions import InvariantError
from src.attendance_tracker.attendance_tracker.ledger.model import (
    AttendanceCounts,
    AttendanceLedger,
    AttendanceRecord,
)


def test_empty_ledger_counts_as_fully_attended():
    ledger = AttendanceLedger()

    assert ledger.conducted == 0
    assert ledger.attended == 0
    assert ledger.percentage == 100.0


def test_recording_same_date_twice_is_idempotent():
    ledger = AttendanceLedger()
    ledger.record_attendance(date(2026, 10, 19), True)
    ledger.record_attendance(date(2026, 10, 19), True)

    assert ledger.conducted == 1
    assert ledger.attended == 1


def test_recording_existing_date_overwrites_presence():
    ledger = AttendanceLedger()
    ledger.record_attendance(date(2026, 10, 19), True)
    ledger.record_attendance(date(2026, 10, 19), False)

    assert ledger.conducted == 1
    assert ledger.attended == 0
    assert ledger.percentage == 0.0


def test_remove_record_is_noop_for_missing_date():
    ledger = AttendanceLedger.from_records([(date(2026, 10, 19), True)])

    ledger.remove_record(date(2026, 10, 20))
    assert ledger.conducted == 1

    ledger.remove_record(date(2026, 10, 19))
    assert ledger.conducted == 0
    assert not ledger.has_record(date(2026, 10, 19))


def test_records_are_a_sorted_snapshot():
    ledger = AttendanceLedger.from_records(
        [
            (date(2026, 10, 21), False),
            (date(2026, 10, 19), True),
        ]
    )

    snapshot = ledger.records()
    ledger.record_attendance(date(2026, 10, 23), True)

    assert snapshot == (
        AttendanceRecord(date=date(2026, 10, 19), present=True),
        AttendanceRecord(date=date(2026, 10, 21), present=False),
    )
    assert len(ledger) == 3


def test_percentage_stays_within_bounds():
    start = date(2026, 1, 5)
    for conducted in range(1, 12):
        for attended in range(conducted + 1):
            ledger = AttendanceLedger(
                AttendanceRecord(date=start + timedelta(days=i), present=i < attended)
                for i in range(conducted)
            )
            assert ledger.attended <= ledger.conducted
            assert 0.0 <= ledger.percentage <= 100.0


def test_counts_reject_more_attended_than_conducted():
    with pytest.raises(InvariantError):
        AttendanceCounts(conducted=3, attended=4)


def test_counts_reject_negative_values():
    with pytest.raises(InvariantError):
        AttendanceCounts(conducted=-1, attended=0)


def test_counts_projection_helpers():
    counts = AttendanceCounts(conducted=10, attended=8)

    assert counts.plus_absences(2) == AttendanceCounts(conducted=12, attended=8)
    assert counts.plus_attended(2) == AttendanceCounts(conducted=12, attended=10)
    assert counts.percentage == 80.0
