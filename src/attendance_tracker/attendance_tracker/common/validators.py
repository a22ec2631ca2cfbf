from __future__ import annotations

from datetime import date

from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} must not be empty")
    return value.strip()


def require_date_order(start: date, end: date, *, start_name: str = "start date", end_name: str = "end date") -> None:
    if end < start:
        raise ValidationError(f"{end_name} ({end}) cannot be before {start_name} ({start})")


def require_threshold(threshold: float) -> float:
    value = float(threshold)
    if not 0.0 < value < 100.0:
        raise ValidationError(f"attendance threshold must be between 0 and 100 (exclusive), got {threshold}")
    return value


def require_iso_date(value: str | None, field_name: str) -> date:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    try:
        return parse_iso_date(str(value).strip())
    except ValueError:
        raise ValidationError(f"{field_name} must be a date in YYYY-MM-DD format")
