from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from ..core.enums import Weekday
from ..core.exceptions import ValidationError


def _parse_days(values) -> list[Weekday]:
    try:
        return [Weekday(str(v).strip().upper()) for v in (values or [])]
    except ValueError:
        raise ValidationError("days must be weekday names such as MONDAY")


def register(app: Flask, container: Container) -> None:
    @app.post("/api/students/<int:student_id>/subjects", endpoint="subjects_add")
    def subjects_add(student_id: int):
        payload = request.get_json(silent=True) or {}
        try:
            classes_per_week = int(payload.get("classes_per_week") or 0)
        except (TypeError, ValueError):
            raise ValidationError("classes_per_week must be a whole number")

        subject_id = container.tracker_service.add_subject(
            student_id=student_id,
            name=payload.get("name") or "",
            classes_per_week=classes_per_week,
            days=_parse_days(payload.get("days")),
        )
        return jsonify({"subject_id": subject_id}), 201

    @app.delete("/api/students/<int:student_id>/subjects/<int:subject_id>", endpoint="subjects_delete")
    def subjects_delete(student_id: int, subject_id: int):
        container.tracker_service.delete_subject(student_id=student_id, subject_id=subject_id)
        return "", 204

    @app.put("/api/students/<int:student_id>/subjects/<int:subject_id>/schedule", endpoint="subjects_schedule")
    def subjects_schedule(student_id: int, subject_id: int):
        payload = request.get_json(silent=True) or {}
        container.tracker_service.set_schedule(
            student_id=student_id,
            subject_id=subject_id,
            days=_parse_days(payload.get("days")),
        )
        return "", 204
