from __future__ import annotations

from flask import Flask, g, jsonify

from ..common.http import json_body
from ..container import Container
from ..core.enums import STAFF_ROLES
from ..users.guards import authenticate, authorize


def register(app: Flask, container: Container) -> None:
    login_required = authenticate(container.token_service)

    @app.route("/api/students", methods=["GET"], endpoint="list_students")
    @login_required
    def list_students():
        students = container.student_service.list_visible(g.identity)
        return jsonify([s.to_dict() for s in students])

    @app.route("/api/students", methods=["POST"], endpoint="create_student")
    @login_required
    @authorize(*STAFF_ROLES)
    def create_student():
        data = json_body()
        student = container.student_service.create_student(data.get("name"))
        return jsonify(student.to_dict())
