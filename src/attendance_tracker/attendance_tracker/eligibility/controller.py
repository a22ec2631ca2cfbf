from __future__ import annotations

from flask import Flask, jsonify

from ..container import Container
from .status import SubjectStatus


def status_to_dict(s: SubjectStatus) -> dict:
    return {
        "subject_id": s.subject_id,
        "name": s.name,
        "attended": s.attended,
        "conducted": s.conducted,
        "percentage": round(s.percentage, 2),
        "eligible": s.eligible,
        "level": s.level.value,
        "safe_bunks": s.safe_bunks,
        "recovery_classes": s.recovery_classes,
        "remaining_classes": s.remaining_classes,
        "max_possible": round(s.max_possible, 2) if s.max_possible is not None else None,
        "message": s.message,
    }


def register(app: Flask, container: Container) -> None:
    @app.get("/api/students/<int:student_id>/status", endpoint="student_status")
    def student_status(student_id: int):
        statuses = container.tracker_service.statuses(student_id)
        return jsonify({"subjects": [status_to_dict(s) for s in statuses]})
