from __future__ import annotations

import importlib
import logging
import sys
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.log import configure_logging
from .container import Container, build_container
from .core.constants import DEFAULT_BACKEND_PORT, DEFAULT_TOKEN_TTL_HOURS
from .core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DatabaseInitError,
    ValidationError,
)
from .courses.controller import register as register_courses
from .database.bootstrap import initialize_database
from .database.connection import DBConfig
from .items.controller import register as register_items
from .students.controller import register as register_students
from .users.controller import register as register_users

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET,POST,PUT,DELETE,OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type,Authorization",
}


def _register_error_handlers(app: Flask) -> None:
    def _error(message: str, status: int):
        return jsonify({"error": message}), status

    @app.errorhandler(ValidationError)
    def _validation(e):
        return _error(str(e), 400)

    @app.errorhandler(ConflictError)
    def _conflict(e):
        return _error(str(e), 400)

    @app.errorhandler(AuthenticationError)
    def _unauthenticated(e):
        return _error(str(e), 401)

    @app.errorhandler(AuthorizationError)
    def _forbidden(e):
        return _error(str(e), 403)

    @app.errorhandler(Exception)
    def _unexpected(e):
        if isinstance(e, HTTPException):
            return _error(e.name.lower(), e.code or 500)
        logger.exception("Unhandled error")
        return _error("server error", 500)


def create_app(*, settings_module: Optional[str] = None, container: Optional[Container] = None) -> Flask:
    """Build the backend app.

    Without an explicit ``container`` the MySQL-backed one is built from the
    active settings module; when ``AUTO_INIT_DB`` is on, the schema is applied
    and demo rows seeded first (raises DatabaseInitError on failure).
    """
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["PORT"] = int(getattr(settings, "PORT", DEFAULT_BACKEND_PORT))
    configure_logging(debug=app.config["DEBUG"])

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info("settings=%s db=%s", settings_module, DBConfig.from_dict(db_config).describe())

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            initialize_database(db_config)
            logger.info("schema ready")

        container = build_container(
            db_config=db_config,
            secret_key=getattr(settings, "SECRET_KEY"),
            token_ttl_hours=int(getattr(settings, "TOKEN_TTL_HOURS", DEFAULT_TOKEN_TTL_HOURS)),
        )

    app.extensions["school_demo"] = container

    @app.after_request
    def _cors(response):
        for header, value in CORS_HEADERS.items():
            response.headers.setdefault(header, value)
        return response

    @app.route("/healthz", methods=["GET"], endpoint="healthz")
    def healthz():
        return "ok"

    _register_error_handlers(app)
    register_items(app, container)
    register_users(app, container)
    register_students(app, container)
    register_courses(app, container)
    register_attendance(app, container)

    return app


def run() -> None:
    """Console entry point: initialize the database, then serve; exit 1 if startup fails."""
    try:
        app = create_app()
    except DatabaseInitError:
        logger.exception("DB init failed")
        sys.exit(1)

    port = app.config["PORT"]
    logger.info("Backend listening on %s", port)
    app.run(host="0.0.0.0", port=port, debug=app.config["DEBUG"], use_reloader=False)
