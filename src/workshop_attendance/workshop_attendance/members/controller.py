from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import api_errors, json_object
from ..container import Container
from ..core.exceptions import RemoteError
from ..reports.filters import ViewContext, filter_members
from .model import member_to_json


def register(app: Flask, container: Container) -> None:
    @app.route("/api/members", methods=["GET"], endpoint="members_list")
    @api_errors
    def members_list():
        view = ViewContext.from_args(request.args.get("category"), request.args.get("search"))
        members = filter_members(container.member_service.list_members(), view)
        return jsonify([member_to_json(m) for m in members])

    @app.route("/api/members/<int:member_id>", methods=["GET"], endpoint="members_get")
    @api_errors
    def members_get(member_id: int):
        return jsonify(member_to_json(container.member_service.get_member(member_id)))

    @app.route("/api/members", methods=["POST"], endpoint="members_add")
    @api_errors
    def members_add():
        data = json_object()
        member = container.member_service.add_member(data)
        return jsonify(member_to_json(member)), 201

    @app.route("/api/members/<int:member_id>", methods=["PUT"], endpoint="members_update")
    @api_errors
    def members_update(member_id: int):
        patch = json_object()
        member = container.member_service.update_member(member_id, patch)
        return jsonify(member_to_json(member))

    @app.route("/api/members/<int:member_id>", methods=["DELETE"], endpoint="members_delete")
    @api_errors
    def members_delete(member_id: int):
        container.member_service.delete_member(member_id)
        return "", 204

    @app.route("/api/members/reload", methods=["POST"], endpoint="members_reload")
    @api_errors
    def members_reload():
        """Re-fetch the roster from the remote API (the banner's Retry button)."""
        app.config["LOAD_ERROR"] = None
        try:
            members = container.member_service.load_from(container.api_client)
        except RemoteError:
            app.config["LOAD_ERROR"] = "Failed to load members. Make sure the server is running."
            raise
        return jsonify([member_to_json(m) for m in members])
