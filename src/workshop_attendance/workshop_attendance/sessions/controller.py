from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import api_errors, json_object
from ..container import Container
from .model import session_to_json


def register(app: Flask, container: Container) -> None:
    @app.route("/api/sessions", methods=["GET"], endpoint="sessions_list")
    def sessions_list():
        return jsonify([session_to_json(s) for s in container.session_service.list_sessions()])

    @app.route("/api/sessions", methods=["POST"], endpoint="sessions_add")
    @api_errors
    def sessions_add():
        data = json_object()
        session = container.session_service.add_session(data)
        return jsonify(session_to_json(session)), 201
