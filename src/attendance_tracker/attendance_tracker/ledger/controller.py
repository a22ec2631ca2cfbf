from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.validators import require_iso_date
from ..container import Container
from ..core.exceptions import ValidationError
from ..eligibility.controller import status_to_dict


def register(app: Flask, container: Container) -> None:
    @app.post("/api/students/<int:student_id>/subjects/<int:subject_id>/attendance", endpoint="attendance_mark")
    def attendance_mark(student_id: int, subject_id: int):
        payload = request.get_json(silent=True) or {}
        day = require_iso_date(payload.get("date"), "Date")
        present = payload.get("present")
        if not isinstance(present, bool):
            raise ValidationError("present must be true or false")

        result = container.tracker_service.mark_attendance(
            student_id=student_id,
            subject_id=subject_id,
            day=day,
            present=present,
        )
        return jsonify({"status": status_to_dict(result.status), "extra_class": result.extra_class})

    @app.delete(
        "/api/students/<int:student_id>/subjects/<int:subject_id>/attendance/<day>",
        endpoint="attendance_delete",
    )
    def attendance_delete(student_id: int, subject_id: int, day: str):
        container.tracker_service.remove_attendance(
            student_id=student_id,
            subject_id=subject_id,
            day=require_iso_date(day, "Date"),
        )
        return "", 204

    @app.post("/api/students/<int:student_id>/subjects/<int:subject_id>/attendance/seed", endpoint="attendance_seed")
    def attendance_seed(student_id: int, subject_id: int):
        payload = request.get_json(silent=True) or {}
        try:
            conducted = int(payload.get("conducted"))
            attended = int(payload.get("attended"))
        except (TypeError, ValueError):
            raise ValidationError("conducted and attended must be whole numbers")

        written = container.tracker_service.seed_attendance(
            student_id=student_id,
            subject_id=subject_id,
            conducted=conducted,
            attended=attended,
        )
        return jsonify({"records": written}), 201

    @app.get("/api/students/<int:student_id>/trends", endpoint="attendance_trends")
    def attendance_trends(student_id: int):
        trends = container.tracker_service.trends(student_id)

        def points(items):
            return [{"week": p.week, "percentage": round(p.percentage, 2)} for p in items]

        return jsonify(
            {
                "subjects": {name: points(items) for name, items in trends["subjects"].items()},
                "overall": points(trends["overall"]),
            }
        )
