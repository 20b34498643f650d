from __future__ import annotations

import csv
import io
from typing import Any

from flask import Flask, jsonify, request

from ..common.http import api_errors
from ..container import Container
from ..members.model import member_to_json
from .filters import ViewContext
from .model import GlobalTotals, MemberStats, ReportData


def stats_to_json(stats: MemberStats, percentage: int) -> dict[str, Any]:
    return {
        "present": stats.present,
        "absent": stats.absent,
        "notMarked": stats.not_marked,
        "totalMarked": stats.total_marked,
        "percentage": percentage,
    }


def totals_to_json(totals: GlobalTotals) -> dict[str, Any]:
    return {
        "totalPresent": totals.total_present,
        "totalAbsent": totals.total_absent,
        "memberCount": totals.member_count,
        "sessionCount": totals.session_count,
    }


def report_to_json(report: ReportData) -> dict[str, Any]:
    return {
        "rows": [
            {
                "position": row.position,
                "member": member_to_json(row.member),
                "stats": stats_to_json(row.stats, row.percentage),
                "rating": row.rating.value,
                "sessions": [
                    {
                        "sessionId": c.session_id,
                        "name": c.session_name,
                        "status": c.status.value if c.status else None,
                    }
                    for c in row.cells
                ],
            }
            for row in report.rows
        ],
        "totals": totals_to_json(report.totals),
    }


def register(app: Flask, container: Container) -> None:
    def _view() -> ViewContext:
        return ViewContext.from_args(request.args.get("category"), request.args.get("search"))

    @app.route("/api/reports/attendance", methods=["GET"], endpoint="reports_attendance")
    @api_errors
    def reports_attendance():
        return jsonify(report_to_json(container.statistics_service.build_report(_view())))

    @app.route("/api/reports/members/<int:member_id>", methods=["GET"], endpoint="reports_member")
    @api_errors
    def reports_member(member_id: int):
        stats = container.statistics_service.member_stats(member_id)
        percentage = container.statistics_service.attendance_percentage(member_id)
        return jsonify(stats_to_json(stats, percentage))

    @app.route("/api/reports/totals", methods=["GET"], endpoint="reports_totals")
    @api_errors
    def reports_totals():
        return jsonify(totals_to_json(container.statistics_service.global_totals()))

    @app.route("/api/reports/attendance.csv", methods=["GET"], endpoint="reports_attendance_csv")
    @api_errors
    def reports_attendance_csv():
        report = container.statistics_service.build_report(_view())

        out = io.StringIO()
        writer = csv.DictWriter(
            out,
            fieldnames=["position", "name", "category", "email", "present", "absent", "not_marked", "percentage", "rating"],
        )
        writer.writeheader()
        for row in report.rows:
            writer.writerow(
                {
                    "position": row.position,
                    "name": row.member.name,
                    "category": row.member.category.value,
                    "email": row.member.email or "",
                    "present": row.stats.present,
                    "absent": row.stats.absent,
                    "not_marked": row.stats.not_marked,
                    "percentage": row.percentage,
                    "rating": row.rating.value,
                }
            )

        csv_bytes = out.getvalue().encode("utf-8-sig")
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": "attachment; filename=attendance_report.csv"},
        )
