from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import api_errors, json_object
from ..common.validators import require_positive_id
from ..container import Container
from .model import attendance_to_json


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance", methods=["POST"], endpoint="attendance_mark")
    @api_errors
    def attendance_mark():
        data = json_object()
        record = container.attendance_service.mark_attendance(
            data.get("memberId"),
            data.get("sessionId"),
            data.get("status"),
            notes=data.get("notes"),
        )
        return jsonify(attendance_to_json(record))

    @app.route("/api/attendance", methods=["GET"], endpoint="attendance_list")
    def attendance_list():
        return jsonify([attendance_to_json(a) for a in container.attendance_service.list_all()])

    @app.route("/api/attendance/member/<int:member_id>", methods=["GET"], endpoint="attendance_for_member")
    @api_errors
    def attendance_for_member(member_id: int):
        records = container.attendance_service.list_for_member(member_id)
        return jsonify([attendance_to_json(a) for a in records])

    @app.route("/api/attendance/status", methods=["GET"], endpoint="attendance_status")
    @api_errors
    def attendance_status():
        member_id = require_positive_id(request.args.get("memberId"), "memberId")
        session_id = require_positive_id(request.args.get("sessionId"), "sessionId")
        status = container.attendance_service.get_status(member_id, session_id)
        return jsonify(
            {
                "memberId": member_id,
                "sessionId": session_id,
                "status": status.value if status else None,
            }
        )
