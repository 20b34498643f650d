from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Optional

from ..common.datetime_utils import parse_iso_date
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class RemoteAttendance:
    """Attendance as the REST backend reports it: keyed by day, not by session."""

    id: int
    member_id: int
    date: date
    status: AttendanceStatus
    notes: Optional[str] = None


def remote_attendance_from_json(data: dict[str, Any]) -> RemoteAttendance:
    return RemoteAttendance(
        id=int(data["id"]),
        member_id=int(data["memberId"]),
        date=parse_iso_date(str(data["date"])[:10]),
        status=AttendanceStatus(data["status"]),
        notes=data.get("notes") or None,
    )
