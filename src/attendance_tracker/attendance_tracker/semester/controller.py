from __future__ import annotations

from flask import Flask, request

from ..common.validators import require_iso_date
from ..container import Container
from .model import SemesterWindow


def register(app: Flask, container: Container) -> None:
    @app.put("/api/students/<int:student_id>/semester", endpoint="semester_save")
    def semester_save(student_id: int):
        payload = request.get_json(silent=True) or {}

        # Mid-sem dates are optional (some semesters do not have them).
        exam_start = exam_end = None
        if payload.get("exam_start") or payload.get("exam_end"):
            exam_start = require_iso_date(payload.get("exam_start"), "Exam start")
            exam_end = require_iso_date(payload.get("exam_end"), "Exam end")

        window = SemesterWindow(
            start=require_iso_date(payload.get("start"), "Semester start"),
            last_teaching_day=require_iso_date(payload.get("last_teaching_day"), "Last teaching day"),
            exam_start=exam_start,
            exam_end=exam_end,
        )
        container.tracker_service.configure_semester(student_id=student_id, window=window)
        return "", 204

    @app.delete("/api/students/<int:student_id>/semester", endpoint="semester_reset")
    def semester_reset(student_id: int):
        container.tracker_service.reset_semester(student_id=student_id)
        return "", 204
