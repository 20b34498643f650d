from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import AttendanceStatus, Rating
from ..members.model import Member


@dataclass(frozen=True)
class MemberStats:
    present: int
    absent: int
    not_marked: int

    @property
    def total_marked(self) -> int:
        return self.present + self.absent


@dataclass(frozen=True)
class GlobalTotals:
    total_present: int
    total_absent: int
    member_count: int
    session_count: int


@dataclass(frozen=True)
class SessionCell:
    session_id: int
    session_name: str
    status: Optional[AttendanceStatus]


@dataclass(frozen=True)
class ReportRow:
    """Read-model for one line of the attendance report."""

    position: int
    member: Member
    stats: MemberStats
    percentage: int
    rating: Rating
    cells: list[SessionCell]


@dataclass(frozen=True)
class ReportData:
    rows: list[ReportRow]
    totals: GlobalTotals
