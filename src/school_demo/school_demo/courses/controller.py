from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body
from ..container import Container
from ..core.enums import STAFF_ROLES
from ..users.guards import authenticate, authorize


def register(app: Flask, container: Container) -> None:
    login_required = authenticate(container.token_service)

    @app.route("/api/courses", methods=["GET"], endpoint="list_courses")
    @login_required
    def list_courses():
        return jsonify([c.to_dict() for c in container.course_service.list_courses()])

    @app.route("/api/courses", methods=["POST"], endpoint="create_course")
    @login_required
    @authorize(*STAFF_ROLES)
    def create_course():
        data = json_body()
        course = container.course_service.create_course(data.get("name"))
        return jsonify(course.to_dict())
