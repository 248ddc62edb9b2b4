from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, Response, jsonify, request, send_from_directory

from config import get_settings_module

from ..common.log import configure_logging
from ..core.constants import DEFAULT_FRONTEND_PORT, DEFAULT_PROXY_TIMEOUT
from .forwarder import BackendForwarder, UpstreamError

logger = logging.getLogger(__name__)

PROXY_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"]


def create_proxy_app(
    *,
    settings_module: Optional[str] = None,
    forwarder: Optional[BackendForwarder] = None,
    static_dir: Optional[str] = None,
) -> Flask:
    """Static file server that forwards ``/api`` and ``/api/*`` to the backend."""
    load_dotenv(override=False)
    settings = importlib.import_module(settings_module or get_settings_module())
    configure_logging(debug=bool(getattr(settings, "DEBUG", False)))

    static_root = Path(static_dir or getattr(settings, "STATIC_DIR")).resolve()
    app = Flask(__name__, static_folder=str(static_root), static_url_path="")
    app.config["FRONTEND_PORT"] = int(getattr(settings, "FRONTEND_PORT", DEFAULT_FRONTEND_PORT))

    forwarder = forwarder or BackendForwarder(
        getattr(settings, "BACKEND_URL"),
        timeout=float(getattr(settings, "PROXY_TIMEOUT", DEFAULT_PROXY_TIMEOUT)),
    )
    app.extensions["school_demo.forwarder"] = forwarder

    @app.route("/", endpoint="index")
    def index():
        return send_from_directory(static_root, "index.html")

    @app.route("/api", defaults={"path": ""}, methods=PROXY_METHODS, provide_automatic_options=False)
    @app.route("/api/<path:path>", methods=PROXY_METHODS, provide_automatic_options=False)
    def api_proxy(path: str):
        try:
            upstream = forwarder.forward(
                method=request.method,
                path=f"api/{path}" if path else "api",
                query=request.query_string,
                headers=request.headers.items(),
                body=request.get_data(),
            )
        except UpstreamError:
            return jsonify({"error": "bad gateway"}), 502

        return Response(upstream.body, status=upstream.status, headers=list(upstream.headers))

    return app


def run() -> None:
    app = create_proxy_app()
    port = app.config["FRONTEND_PORT"]
    logger.info("Frontend listening on %s, proxy -> %s", port, app.extensions["school_demo.forwarder"].backend_url)
    app.run(host="0.0.0.0", port=port, use_reloader=False)
