from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class Attendance:
    """Domain entity: the mark for one (member, session) pair."""

    id: int
    member_id: int
    session_id: int
    status: AttendanceStatus
    notes: Optional[str] = None


def attendance_to_json(record: Attendance) -> dict[str, Any]:
    return {
        "id": record.id,
        "memberId": record.member_id,
        "sessionId": record.session_id,
        "status": record.status.value,
        "notes": record.notes,
    }
