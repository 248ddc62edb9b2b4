from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/items", methods=["GET"], endpoint="list_items")
    def list_items():
        return jsonify([item.to_dict() for item in container.item_service.list_items()])

    @app.route("/api/items", methods=["POST"], endpoint="create_item")
    def create_item():
        data = json_body()
        item = container.item_service.add_item(data.get("text"))
        return jsonify(item.to_dict())
