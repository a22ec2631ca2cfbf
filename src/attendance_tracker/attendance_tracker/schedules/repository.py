from __future__ import annotations

from typing import Protocol, Sequence

from ..core.enums import Weekday


class ScheduleRepository(Protocol):
    def list_days_for_subject(self, subject_id: int) -> Sequence[Weekday]:
        raise NotImplementedError

    def replace_for_subject(self, *, subject_id: int, days: Sequence[Weekday]) -> None:
        """Replace the weekdays a subject meets on."""

        raise NotImplementedError
