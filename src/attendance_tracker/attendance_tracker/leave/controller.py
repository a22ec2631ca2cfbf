from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.validators import require_iso_date
from ..container import Container
from .simulator import LeaveImpactReport, SubjectImpact


def _impact_to_dict(i: SubjectImpact) -> dict:
    out = {
        "subject_id": i.subject.subject_id,
        "name": i.subject.name,
        "current_percentage": round(i.current_percentage, 2),
        "post_leave_percentage": round(i.post_leave_percentage, 2),
        "classes_missed": i.classes_missed,
        "eligible_after_leave": i.eligible_after_leave,
        "semester_projection": None,
    }
    p = i.projection
    if p is not None:
        out["semester_projection"] = {
            "remaining_classes": p.remaining_classes,
            "best_case_percentage": round(p.best_case_percentage, 2),
            "can_still_miss": p.can_still_miss,
            "must_attend": p.must_attend,
            "outcome": p.outcome.value,
        }
    return out


def report_to_dict(report: LeaveImpactReport) -> dict:
    return {
        "start": report.start.isoformat(),
        "end": report.end.isoformat(),
        "threshold": report.threshold,
        "verdict": report.verdict.value,
        "subjects": [_impact_to_dict(i) for i in report.impacts],
        "at_risk": [i.subject.name for i in report.at_risk],
    }


def register(app: Flask, container: Container) -> None:
    @app.post("/api/students/<int:student_id>/leave-impact", endpoint="leave_impact")
    def leave_impact(student_id: int):
        payload = request.get_json(silent=True) or {}
        start = require_iso_date(payload.get("start"), "Start date")
        end = require_iso_date(payload.get("end"), "End date")

        report = container.tracker_service.leave_impact(student_id, start=start, end=end)
        return jsonify(report_to_dict(report))
