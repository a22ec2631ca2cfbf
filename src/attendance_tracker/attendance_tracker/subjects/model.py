from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..ledger.model import AttendanceLedger


@dataclass(eq=False)
class Subject:
    """A course the student attends; owns exactly one ledger."""

    name: str
    classes_per_week: int = 0
    subject_id: Optional[int] = None
    ledger: AttendanceLedger = field(default_factory=AttendanceLedger, repr=False)

    # Names are unique per student; the id is storage detail and may be unset.
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Subject):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __str__(self) -> str:
        return f"{self.name}: {self.ledger.attended}/{self.ledger.conducted} ({self.ledger.percentage:.2f}%)"
