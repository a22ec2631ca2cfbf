from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.validators import require_iso_date
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.post("/api/students/<int:student_id>/holidays", endpoint="holidays_add")
    def holidays_add(student_id: int):
        """Add one holiday (``date``) or a group (``from`` .. ``to``)."""
        payload = request.get_json(silent=True) or {}
        description = payload.get("description")

        if payload.get("date"):
            day = require_iso_date(payload.get("date"), "Date")
            cleared = container.tracker_service.add_holiday(student_id=student_id, day=day, description=description)
        else:
            cleared = container.tracker_service.add_holiday_range(
                student_id=student_id,
                start=require_iso_date(payload.get("from"), "From date"),
                end=require_iso_date(payload.get("to"), "To date"),
                description=description,
            )
        return jsonify({"cleared_records": cleared}), 201

    @app.put("/api/students/<int:student_id>/holidays/<day>", endpoint="holidays_update")
    def holidays_update(student_id: int, day: str):
        payload = request.get_json(silent=True) or {}
        container.tracker_service.update_holiday(
            student_id=student_id,
            old_date=require_iso_date(day, "Date"),
            new_date=require_iso_date(payload.get("date"), "New date"),
            description=payload.get("description"),
        )
        return "", 204

    @app.delete("/api/students/<int:student_id>/holidays/<day>", endpoint="holidays_delete")
    def holidays_delete(student_id: int, day: str):
        container.tracker_service.remove_holiday(student_id=student_id, day=require_iso_date(day, "Date"))
        return "", 204

    @app.delete("/api/students/<int:student_id>/holidays", endpoint="holidays_delete_group")
    def holidays_delete_group(student_id: int):
        removed = container.tracker_service.remove_holidays_by_description(
            student_id=student_id,
            description=request.args.get("description", ""),
        )
        return jsonify({"removed": removed})
