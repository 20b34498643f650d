from __future__ import annotations

from contextlib import AbstractContextManager, nullcontext
from typing import Callable, Optional

from ..attendance.repository import AttendanceRepository
from ..core.constants import GOOD_ATTENDANCE_PERCENT, WARNING_ATTENDANCE_PERCENT
from ..core.enums import AttendanceStatus, Rating
from ..core.exceptions import ConsistencyError, NotFoundError
from ..members.repository import MemberRepository
from ..sessions.repository import SessionRepository
from .filters import ViewContext, filter_members
from .model import GlobalTotals, MemberStats, ReportData, ReportRow, SessionCell


def percentage(present: int, total_marked: int) -> int:
    """present/total as a whole percent, halves rounded up; 0 when nothing is marked."""
    if total_marked <= 0:
        return 0
    return (present * 200 + total_marked) // (total_marked * 2)


def rating_for(percent: int) -> Rating:
    if percent >= GOOD_ATTENDANCE_PERCENT:
        return Rating.GOOD
    if percent >= WARNING_ATTENDANCE_PERCENT:
        return Rating.WARNING
    return Rating.POOR


class StatisticsService:
    """Derived attendance figures, recomputed from the store on every call.

    Nothing is cached: each read rescans the attendance collection. Running
    per-member counters maintained inside the upsert would be the next step
    if rosters ever grow large.
    """

    def __init__(
        self,
        members: MemberRepository,
        sessions: SessionRepository,
        attendance: AttendanceRepository,
        *,
        unit_of_work: Optional[Callable[[], AbstractContextManager]] = None,
    ):
        self._members = members
        self._sessions = sessions
        self._attendance = attendance
        self._unit_of_work = unit_of_work or nullcontext

    def member_stats(self, member_id: int) -> MemberStats:
        with self._unit_of_work():
            if not self._members.get_by_id(int(member_id)):
                raise NotFoundError(f"Member {member_id} does not exist")
            records = self._attendance.list_for_member(int(member_id))
            session_count = self._sessions.count()

        present = sum(1 for a in records if a.status == AttendanceStatus.PRESENT)
        absent = sum(1 for a in records if a.status == AttendanceStatus.ABSENT)
        not_marked = session_count - present - absent
        if not_marked < 0:
            raise ConsistencyError(
                f"Member {member_id} has {present + absent} marks for {session_count} sessions"
            )
        return MemberStats(present=present, absent=absent, not_marked=not_marked)

    def attendance_percentage(self, member_id: int) -> int:
        stats = self.member_stats(member_id)
        return percentage(stats.present, stats.total_marked)

    def global_totals(self) -> GlobalTotals:
        """Totals over the whole store; never narrowed by a view filter."""
        with self._unit_of_work():
            records = self._attendance.list_all()
            member_count = len(self._members.list_all())
            session_count = self._sessions.count()

        return GlobalTotals(
            total_present=sum(1 for a in records if a.status == AttendanceStatus.PRESENT),
            total_absent=sum(1 for a in records if a.status == AttendanceStatus.ABSENT),
            member_count=member_count,
            session_count=session_count,
        )

    def build_report(self, view: Optional[ViewContext] = None) -> ReportData:
        view = view or ViewContext()

        with self._unit_of_work():
            members = filter_members(self._members.list_all(), view)
            sessions = self._sessions.list_all()
            rows: list[ReportRow] = []
            for position, member in enumerate(members, start=1):
                stats = self.member_stats(member.id)
                percent = percentage(stats.present, stats.total_marked)
                by_session = {a.session_id: a.status for a in self._attendance.list_for_member(member.id)}
                rows.append(
                    ReportRow(
                        position=position,
                        member=member,
                        stats=stats,
                        percentage=percent,
                        rating=rating_for(percent),
                        cells=[SessionCell(s.id, s.name, by_session.get(s.id)) for s in sessions],
                    )
                )
            totals = self.global_totals()

        return ReportData(rows=rows, totals=totals)
