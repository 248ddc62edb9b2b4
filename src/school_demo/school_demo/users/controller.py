from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body
from ..container import Container
from ..core.enums import Role
from .guards import authenticate, authorize


def register(app: Flask, container: Container) -> None:
    login_required = authenticate(container.token_service)

    @app.route("/api/auth/login", methods=["POST"], endpoint="login")
    def login():
        data = json_body()
        result = container.auth_service.login(data.get("username"), data.get("password"))
        return jsonify(result.to_dict())

    @app.route("/api/auth/register", methods=["POST"], endpoint="register_user")
    @login_required
    @authorize(Role.ADMIN)
    def register_user():
        """Create an account; role=student also creates and links a student named ``student_name``."""
        data = json_body()
        user = container.user_service.register(
            username=data.get("username"),
            password=data.get("password"),
            role=data.get("role"),
            student_name=data.get("student_name"),
        )
        return jsonify(user.to_public_dict())
