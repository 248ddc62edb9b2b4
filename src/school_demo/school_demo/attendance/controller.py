from __future__ import annotations

from flask import Flask, g, jsonify, request

from ..common.http import json_body
from ..container import Container
from ..core.enums import STAFF_ROLES, Role
from ..users.guards import authenticate, authorize


def register(app: Flask, container: Container) -> None:
    login_required = authenticate(container.token_service)

    @app.route("/api/attendance", methods=["POST"], endpoint="record_attendance")
    @login_required
    @authorize(*STAFF_ROLES)
    def record_attendance():
        """Body: {course_id, date: 'YYYY-MM-DD', records: [{student_id, present}]}."""
        data = json_body()
        container.attendance_service.record_batch(
            course_id=data.get("course_id"),
            on_date=data.get("date"),
            records=data.get("records"),
        )
        return jsonify({"ok": True})

    @app.route("/api/attendance", methods=["GET"], endpoint="course_attendance")
    @login_required
    @authorize(*STAFF_ROLES)
    def course_attendance():
        rows = container.attendance_service.list_for_course(
            course_id=request.args.get("course_id"),
            on_date=request.args.get("date"),
        )
        return jsonify([r.to_dict() for r in rows])

    @app.route("/api/attendance/self", methods=["GET"], endpoint="own_attendance")
    @login_required
    @authorize(Role.STUDENT)
    def own_attendance():
        rows = container.attendance_service.list_own(g.identity, on_date=request.args.get("date"))
        return jsonify([r.to_dict() for r in rows])
